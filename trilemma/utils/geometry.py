"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

Point = tuple[float, float]


def polar_points(
    origin: Point,
    distance: float,
    angles_deg: Sequence[float],
) -> NDArray[np.float64]:
    """Nx2 array of points at ``distance`` from ``origin`` (SVG axes, y down)."""
    theta = np.radians(np.asarray(angles_deg, dtype=np.float64))
    return np.column_stack([
        origin[0] + distance * np.cos(theta),
        origin[1] + distance * np.sin(theta),
    ])


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def bearing_deg(origin: Point, target: Point) -> float:
    """Angle of ``target`` seen from ``origin``, in [0, 360)."""
    return math.degrees(math.atan2(target[1] - origin[1], target[0] - origin[0])) % 360.0


def angular_gap_deg(a: float, b: float) -> float:
    """Smallest unsigned difference between two angles, in [0, 180]."""
    diff = abs(a - b) % 360.0
    return min(diff, 360.0 - diff)


def normalize_degrees(angle: float) -> float:
    """Reduce an angle to [0, 360)."""
    return angle % 360.0


def circumradius_equilateral(side: float) -> float:
    """Centroid-to-vertex distance of an equilateral triangle: side / sqrt(3)."""
    return side / math.sqrt(3)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
