"""Linear program formulation schema."""

from .schema import (
    Relation,
    WeightedVariable,
    Constraint,
    Objective,
    Components,
)

__all__ = [
    "Relation",
    "WeightedVariable",
    "Constraint",
    "Objective",
    "Components",
]
