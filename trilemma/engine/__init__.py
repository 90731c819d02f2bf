"""Trilemma geometry engine."""

from trilemma.engine.analysis import AnalysisState, AnalysisStatus
from trilemma.engine.constraints import Constraint
from trilemma.engine.layout import (
    IntersectionState,
    InvalidGeometryError,
    Layout,
    classify_intersection,
    compute_layout,
)

__all__ = [
    "AnalysisState",
    "AnalysisStatus",
    "Constraint",
    "IntersectionState",
    "InvalidGeometryError",
    "Layout",
    "classify_intersection",
    "compute_layout",
]
