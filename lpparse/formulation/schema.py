"""
Linear program schema using Pydantic.

Defines the Components structure produced by the text parser and consumed
by a Builder:

    var x;                                  -> WeightedVariable(x, 0.0)
    maximize profit: 3*x + 2*y;             -> Objective
    subject to capacity: x + y <= 4;        -> Constraint
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Relation(str, Enum):
    """Comparison operator of a constraint."""

    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    EQUAL = "=="


class WeightedVariable(BaseModel):
    """One occurrence of a variable with a signed coefficient."""

    name: str = Field(..., description="Variable name (e.g., 'x1', 'radio')")
    coefficient: float = Field(
        ...,
        description="Signed weight; 0.0 for declarations (informational only)"
    )

    class Config:
        frozen = True  # Immutable


class Constraint(BaseModel):
    """Named linear constraint: sum(terms) <relation> constant."""

    name: str = Field(..., description="Constraint name (e.g., 'budget')")
    terms: list[WeightedVariable] = Field(..., description="Left-hand side terms")
    constant: float = Field(..., description="Right-hand side constant")
    relation: Relation = Field(..., description="Comparison operator")

    class Config:
        frozen = True  # Immutable


class Objective(BaseModel):
    """Single linear objective."""

    name: str = Field(..., description="Objective name (e.g., 'profit')")
    terms: list[WeightedVariable] = Field(..., description="Objective terms")
    maximize: bool = Field(..., description="True for maximize, False for minimize")

    class Config:
        frozen = True  # Immutable


class Components(BaseModel):
    """
    Parsed linear program, one per parse call.

    Example:
        >>> components = Components(
        ...     variables=[WeightedVariable(name="x", coefficient=0.0)],
        ...     constraints=[
        ...         Constraint(name="cap", terms=[WeightedVariable(name="x", coefficient=1.0)],
        ...                    constant=4.0, relation=Relation.LESS_OR_EQUAL)
        ...     ],
        ...     objective=Objective(name="f", terms=[WeightedVariable(name="x", coefficient=3.0)],
        ...                         maximize=True)
        ... )
    """

    variables: list[WeightedVariable] = Field(
        default_factory=list,
        description="Declared variables in declaration order"
    )

    constraints: list[Constraint] = Field(
        default_factory=list,
        description="Constraints in document order"
    )

    objective: Objective = Field(..., description="The objective function")

    @property
    def n_variables(self) -> int:
        """Number of declared variables."""
        return len(self.variables)

    @property
    def n_constraints(self) -> int:
        """Number of constraints."""
        return len(self.constraints)

    @property
    def variable_names(self) -> list[str]:
        """Declared variable names in declaration order."""
        return [var.name for var in self.variables]

    def get_constraint(self, name: str) -> Optional[Constraint]:
        """Look up a constraint by name (first match)."""
        for cons in self.constraints:
            if cons.name == name:
                return cons
        return None

    class Config:
        frozen = True  # Immutable
