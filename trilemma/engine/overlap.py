"""Overlap diagnostics — pairwise and three-way disc intersection.

Informational only. The layout classification stays the centroid-coverage
test in ``layout.classify_intersection``; these numbers let a caller see how
that compares to the exact region shared by all three discs.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from trilemma.engine.constraints import Constraint
from trilemma.engine.layout import Layout
from trilemma.utils.geometry import distance

# Segments per quarter circle when approximating a disc
_DISC_RESOLUTION = 64


@dataclass(frozen=True)
class PairOverlap:
    pair: tuple[Constraint, Constraint]
    overlaps: bool
    area: float


@dataclass(frozen=True)
class OverlapReport:
    pairs: tuple[PairOverlap, ...]
    triple_area: float

    @property
    def all_pairs_overlap(self) -> bool:
        return all(p.overlaps for p in self.pairs)

    @property
    def has_triple_region(self) -> bool:
        return self.triple_area > 0.0


def _disc(center: tuple[float, float], radius: float) -> Polygon:
    return ShapelyPoint(center).buffer(radius, quad_segs=_DISC_RESOLUTION)


def pairwise_overlaps(layout: Layout) -> tuple[PairOverlap, ...]:
    """Overlap per labelled pair. Two equal discs meet iff center distance < 2r."""
    r = layout.params.radius
    results = []
    for label in layout.pairwise_labels:
        a = layout.circle(label.pair[0])
        b = layout.circle(label.pair[1])
        overlaps = distance(a.center, b.center) < 2 * r
        area = float(_disc(a.center, r).intersection(_disc(b.center, r)).area) if overlaps else 0.0
        results.append(PairOverlap(pair=label.pair, overlaps=overlaps, area=round(area, 2)))
    return tuple(results)


def triple_overlap_area(layout: Layout) -> float:
    """Area of the region inside all three discs (polygon approximation)."""
    r = layout.params.radius
    discs = [_disc(c.center, r) for c in layout.circles]
    common = discs[0].intersection(discs[1]).intersection(discs[2])
    if common.is_empty:
        return 0.0
    return round(float(common.area), 2)


def overlap_report(layout: Layout) -> OverlapReport:
    return OverlapReport(pairs=pairwise_overlaps(layout), triple_area=triple_overlap_area(layout))
