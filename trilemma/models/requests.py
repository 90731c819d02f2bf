"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    radius: float = Field(..., gt=0, description="Circle radius (canvas units)")
    separation: float = Field(..., gt=0, description="Edge length of the triangle of centers")
    rotation: float = Field(default=0.0, description="Rotation in degrees, any value")
    include_overlap: bool = Field(
        default=False,
        description="Also compute exact pairwise/three-way overlap areas",
    )


class GeometryUpdateRequest(BaseModel):
    radius: float | None = Field(default=None, allow_inf_nan=False, description="New radius, clamped to [80, 180]")
    separation: float | None = Field(default=None, allow_inf_nan=False, description="New separation, clamped to [100, 350]")
    rotation: float | None = Field(default=None, allow_inf_nan=False, description="New rotation, clamped to [0, 360]")


class AnalysisRequest(BaseModel):
    context: str = Field(..., description="Free-text project context")
