"""The three competing constraints and the trade-off named by each pair.

Order matters: circle ``i`` is placed at base angle ``BASE_ANGLES_DEG[i]``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Constraint(str, enum.Enum):
    SPEED = "speed"
    QUALITY = "quality"
    COST = "cost"


@dataclass(frozen=True)
class ConstraintStyle:
    label: str
    description: str
    color: str
    summary: str


# Top, lower-right, lower-left; 120° apart
BASE_ANGLES_DEG: tuple[float, float, float] = (-90.0, 30.0, 150.0)

CONSTRAINT_ORDER: tuple[Constraint, Constraint, Constraint] = (
    Constraint.SPEED,
    Constraint.QUALITY,
    Constraint.COST,
)

CONSTRAINT_STYLES: dict[Constraint, ConstraintStyle] = {
    Constraint.SPEED: ConstraintStyle(
        label="快",
        description="Fast (Speed)",
        color="rgba(6, 182, 212, 0.6)",  # cyan
        summary=(
            "Time to market, delivery speed, responsiveness. Focusing here often "
            "requires sacrificing deep testing or low cost."
        ),
    ),
    Constraint.QUALITY: ConstraintStyle(
        label="准",
        description="Accurate (Quality)",
        color="rgba(236, 72, 153, 0.6)",  # pink
        summary=(
            "Quality, scope, precision, reliability. High quality usually takes "
            "time or costs significant money."
        ),
    ),
    Constraint.COST: ConstraintStyle(
        label="省",
        description="Cheap (Cost)",
        color="rgba(234, 179, 8, 0.6)",  # yellow
        summary=(
            "Budget, resource efficiency, low cost. Saving money often means "
            "cutting corners on quality or speed."
        ),
    ),
}


@dataclass(frozen=True)
class PairSpec:
    first: Constraint
    second: Constraint
    text: str
    description: str


# What you get when you give up the third constraint
PAIR_SPECS: tuple[PairSpec, PairSpec, PairSpec] = (
    PairSpec(Constraint.SPEED, Constraint.QUALITY, "Expensive", "Fast + Accurate"),
    PairSpec(Constraint.QUALITY, Constraint.COST, "Slow", "Accurate + Cheap"),
    PairSpec(Constraint.SPEED, Constraint.COST, "Low Quality", "Fast + Cheap"),
)
