"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from trilemma.engine.config import GeometryConfig


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    trilemma_env: str = "development"
    trilemma_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Text generation
    model_name: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 1024

    # Canvas, slider defaults and slider ranges
    canvas_width: float = 800.0
    canvas_height: float = 600.0
    default_radius: float = 130.0
    default_separation: float = 230.0
    default_rotation: float = 0.0
    radius_min: float = 80.0
    radius_max: float = 180.0
    separation_min: float = 100.0
    separation_max: float = 350.0
    rotation_min: float = 0.0
    rotation_max: float = 360.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def geometry_config(self) -> GeometryConfig:
        return GeometryConfig(
            canvas_width=self.canvas_width,
            canvas_height=self.canvas_height,
            default_radius=self.default_radius,
            default_separation=self.default_separation,
            default_rotation=self.default_rotation,
            radius_min=self.radius_min,
            radius_max=self.radius_max,
            separation_min=self.separation_min,
            separation_max=self.separation_max,
            rotation_min=self.rotation_min,
            rotation_max=self.rotation_max,
        )


settings = Settings()
