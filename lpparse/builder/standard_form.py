"""
Standard-form LP builder.

Turns parsed components into A x = b, x >= 0 by adding one slack column per
inequality constraint:

    subject to c1: 20*x + 6*y <= 182;   ->  20 x + 6 y + s1       = 182
    subject to c2: x + y >= 1;          ->     x +   y      - s2  = 1
    subject to c3: x == 2;              ->     x                  = 2
"""

from typing import Dict, List, Optional
import logging
import numpy as np

from ..formulation.schema import Constraint, Objective, Relation, WeightedVariable
from .base import BuilderBase, BuildError, Lp, Optimization

logger = logging.getLogger(__name__)


class StandardFormBuilder(BuilderBase):
    """
    Builder producing an Lp in standard form.

    Example:
        builder = StandardFormBuilder()
        for var in components.variables:
            builder.add_variable(var)
        for cons in components.constraints:
            builder.add_constraint(cons)
        builder.add_objective(components.objective)
        lp = builder.build()
    """

    SLACK_PREFIX = "slack_"

    def __init__(self):
        """Initialize empty builder."""
        self._variables: List[str] = []
        self._index: Dict[str, int] = {}
        self._constraints: List[Constraint] = []
        self._objective: Optional[Objective] = None

    def add_variable(self, variable: WeightedVariable) -> None:
        if variable.name in self._index:
            raise BuildError(f"Variable '{variable.name}' declared more than once")
        self._index[variable.name] = len(self._variables)
        self._variables.append(variable.name)

    def add_constraint(self, constraint: Constraint) -> None:
        # slack columns are named after their constraint
        if any(cons.name == constraint.name for cons in self._constraints):
            raise BuildError(f"Constraint '{constraint.name}' defined more than once")
        self._constraints.append(constraint)

    def add_objective(self, objective: Objective) -> None:
        self._objective = objective

    def _column(self, term: WeightedVariable, owner: str) -> int:
        try:
            return self._index[term.name]
        except KeyError:
            raise BuildError(f"{owner} uses undeclared variable '{term.name}'") from None

    def build(self) -> Lp:
        if self._objective is None:
            raise BuildError("No objective function provided")

        slack_rows = [
            i for i, cons in enumerate(self._constraints)
            if cons.relation != Relation.EQUAL
        ]
        slack_names = [
            f"{self.SLACK_PREFIX}{self._constraints[i].name}" for i in slack_rows
        ]

        n_vars = len(self._variables)
        n_rows = len(self._constraints)
        n_cols = n_vars + len(slack_rows)

        A = np.zeros((n_rows, n_cols))
        b = np.zeros(n_rows)
        c = np.zeros(n_cols)

        for row, cons in enumerate(self._constraints):
            for term in cons.terms:
                A[row, self._column(term, f"Constraint '{cons.name}'")] += term.coefficient
            b[row] = cons.constant

        for offset, row in enumerate(slack_rows):
            relation = self._constraints[row].relation
            A[row, n_vars + offset] = 1.0 if relation == Relation.LESS_OR_EQUAL else -1.0

        for term in self._objective.terms:
            c[self._column(term, f"Objective '{self._objective.name}'")] += term.coefficient

        optimization = Optimization.MAX if self._objective.maximize else Optimization.MIN

        logger.debug(
            f"Built LP: {n_rows} rows, {n_vars} variables + {len(slack_rows)} slacks, "
            f"{optimization.value}"
        )

        return Lp(
            A=A,
            b=b,
            c=c,
            optimization=optimization,
            variable_names=list(self._variables),
            slack_names=slack_names,
        )
