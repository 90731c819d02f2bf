"""Geometry configuration — canvas, defaults and the ranges exposed to users."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConfig:
    """Controls where the triangle is drawn and how far users may push it."""

    # Logical canvas; the centroid sits in the middle
    canvas_width: float = 800.0
    canvas_height: float = 600.0

    # Defaults leave a visible hole in the middle: 230 > 130 * sqrt(3) ~ 225
    default_radius: float = 130.0
    default_separation: float = 230.0
    default_rotation: float = 0.0

    # Slider ranges
    radius_min: float = 80.0
    radius_max: float = 180.0
    separation_min: float = 100.0
    separation_max: float = 350.0
    rotation_min: float = 0.0
    rotation_max: float = 360.0

    @property
    def centroid(self) -> tuple[float, float]:
        return (self.canvas_width / 2, self.canvas_height / 2)
