"""
Abstract base class for LP builders.

A builder receives parsed components one at a time and assembles the
numeric model handed to a solver. The column layout (slack variables,
ordering) is owned entirely by the builder.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List
import numpy as np

from ..formulation.schema import Constraint, Objective, WeightedVariable


class BuildError(ValueError):
    """Raised when parsed components cannot be assembled into an LP."""
    pass


class Optimization(str, Enum):
    """Optimization direction."""

    MAX = "max"
    MIN = "min"


@dataclass
class Lp:
    """
    Numeric linear program in standard form: A x = b, x >= 0.

    Columns of A and entries of c follow variable_names + slack_names.
    """

    A: np.ndarray
    b: np.ndarray
    c: np.ndarray
    optimization: Optimization

    variable_names: List[str] = field(default_factory=list)
    slack_names: List[str] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        """Number of constraint rows."""
        return self.A.shape[0]

    @property
    def n_columns(self) -> int:
        """Number of columns (declared variables plus slacks)."""
        return self.A.shape[1]

    @property
    def column_names(self) -> List[str]:
        """All column names in matrix order."""
        return self.variable_names + self.slack_names

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain lists for display or serialization."""
        return {
            "A": self.A.tolist(),
            "b": self.b.tolist(),
            "c": self.c.tolist(),
            "optimization": self.optimization.value,
            "variable_names": list(self.variable_names),
            "slack_names": list(self.slack_names),
        }


class BuilderBase(ABC):
    """
    Builder interface consumed by lp_from_text / lp_from_file.

    Components arrive in order: variables, constraints, objective; build()
    is called once afterwards.
    """

    @abstractmethod
    def add_variable(self, variable: WeightedVariable) -> None:
        """Register a declared variable."""
        pass

    @abstractmethod
    def add_constraint(self, constraint: Constraint) -> None:
        """Register a constraint row."""
        pass

    @abstractmethod
    def add_objective(self, objective: Objective) -> None:
        """Register the objective."""
        pass

    @abstractmethod
    def build(self) -> Lp:
        """
        Assemble the numeric model.

        Returns:
            Lp with coefficient matrix, bounds vector, objective vector
            and optimization direction
        """
        pass
