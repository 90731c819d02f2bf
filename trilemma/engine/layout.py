"""Layout — circle placement and central-overlap classification.

The three circle centers sit on the vertices of an equilateral triangle whose
edge length is ``separation``. Every derived value here is a pure function of
``(radius, separation, rotation, centroid)``.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from trilemma.engine.constraints import (
    BASE_ANGLES_DEG,
    CONSTRAINT_ORDER,
    CONSTRAINT_STYLES,
    PAIR_SPECS,
    Constraint,
)
from trilemma.utils.geometry import (
    Point,
    circumradius_equilateral,
    midpoint,
    normalize_degrees,
    polar_points,
)

DEFAULT_CENTROID: Point = (400.0, 300.0)

SQRT3 = math.sqrt(3)


class InvalidGeometryError(ValueError):
    """Raised for non-positive or non-finite radius/separation."""


class IntersectionState(str, enum.Enum):
    COMMON_OVERLAP = "common_overlap"
    CENTRAL_VOID = "central_void"


@dataclass(frozen=True)
class GeometryParameters:
    radius: float
    separation: float
    rotation: float = 0.0


@dataclass(frozen=True)
class Circle:
    identity: Constraint
    center: Point
    radius: float
    label: str
    description: str
    color: str

    @property
    def caption(self) -> str:
        return self.description.split(" ")[0]


@dataclass(frozen=True)
class PairwiseLabel:
    pair: tuple[Constraint, Constraint]
    text: str
    description: str
    position: Point


@dataclass(frozen=True)
class Layout:
    """Derived placement for one parameter set.

    ``center_distance`` is separation / sqrt(3) as computed in floating point.
    ``intersection`` is decided in the separation domain (separation <= radius
    * sqrt(3)), so exactly at the threshold a layout can report
    ``center_distance`` a rounding step above ``radius`` and still be
    COMMON_OVERLAP; the threshold itself counts as overlap.
    """

    params: GeometryParameters
    centroid: Point
    center_distance: float
    circles: tuple[Circle, Circle, Circle]
    pairwise_labels: tuple[PairwiseLabel, PairwiseLabel, PairwiseLabel]
    intersection: IntersectionState

    @property
    def has_common_overlap(self) -> bool:
        return self.intersection is IntersectionState.COMMON_OVERLAP

    @property
    def rotation_display(self) -> float:
        return normalize_degrees(self.params.rotation)

    @property
    def ratio(self) -> float:
        """separation / radius; above sqrt(3) the middle is empty."""
        return self.params.separation / self.params.radius

    @property
    def void_threshold(self) -> float:
        return void_threshold(self.params.radius)

    def circle(self, identity: Constraint) -> Circle:
        for c in self.circles:
            if c.identity is identity:
                return c
        raise KeyError(identity)


def _check_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidGeometryError(f"{name} must be a positive finite number, got {value!r}")


def void_threshold(radius: float) -> float:
    """Largest separation that still leaves the centroid covered: radius * sqrt(3)."""
    return radius * SQRT3


def classify_intersection(radius: float, separation: float) -> IntersectionState:
    """CommonOverlap iff the centroid-to-center distance does not exceed the radius."""
    _check_positive("radius", radius)
    _check_positive("separation", separation)
    # Same test as d <= radius, kept in the separation domain so the
    # threshold case separation == radius * sqrt(3) compares exactly
    if separation <= void_threshold(radius):
        return IntersectionState.COMMON_OVERLAP
    return IntersectionState.CENTRAL_VOID


def compute_layout(
    radius: float,
    separation: float,
    rotation: float = 0.0,
    centroid: Point = DEFAULT_CENTROID,
) -> Layout:
    """Place the three circles and classify the middle of the arrangement."""
    _check_positive("radius", radius)
    _check_positive("separation", separation)
    if not math.isfinite(rotation):
        raise InvalidGeometryError(f"rotation must be finite, got {rotation!r}")

    d = circumradius_equilateral(separation)

    centers = polar_points(centroid, d, [base + rotation for base in BASE_ANGLES_DEG])

    circles = []
    for identity, (x, y) in zip(CONSTRAINT_ORDER, centers):
        style = CONSTRAINT_STYLES[identity]
        circles.append(
            Circle(
                identity=identity,
                center=(float(x), float(y)),
                radius=radius,
                label=style.label,
                description=style.description,
                color=style.color,
            )
        )

    by_identity = {c.identity: c.center for c in circles}
    labels = tuple(
        PairwiseLabel(
            pair=(p.first, p.second),
            text=p.text,
            description=p.description,
            position=midpoint(by_identity[p.first], by_identity[p.second]),
        )
        for p in PAIR_SPECS
    )

    intersection = classify_intersection(radius, separation)

    return Layout(
        params=GeometryParameters(radius=radius, separation=separation, rotation=rotation),
        centroid=centroid,
        center_distance=d,
        circles=tuple(circles),  # type: ignore[arg-type]
        pairwise_labels=labels,  # type: ignore[arg-type]
        intersection=intersection,
    )


def layout_from_params(params: GeometryParameters, centroid: Point = DEFAULT_CENTROID) -> Layout:
    return compute_layout(params.radius, params.separation, params.rotation, centroid)
