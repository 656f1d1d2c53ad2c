"""
SciPy linprog backend.

Solves a standard-form Lp (A x = b, x >= 0) with scipy.optimize.linprog.
Maximization is handled by negating the objective vector.
"""

from typing import Dict, Any, List
import numpy as np
import logging

from ..builder.base import Lp, Optimization
from .result import LPResult

logger = logging.getLogger(__name__)


class LinprogBackend:
    """
    SciPy linprog backend.

    Supported methods follow scipy.optimize.linprog:
    - highs: let HiGHS choose (recommended)
    - highs-ds: dual simplex
    - highs-ipm: interior point
    """

    METHODS = ["highs", "highs-ds", "highs-ipm"]

    @property
    def name(self) -> str:
        return "scipy"

    def is_available(self) -> bool:
        try:
            import scipy.optimize
            return True
        except ImportError:
            return False

    def get_methods(self) -> List[str]:
        return list(self.METHODS)

    def get_info(self) -> Dict[str, Any]:
        return {
            "name": "SciPy linprog",
            "methods": self.get_methods(),
        }

    def solve(self, lp: Lp, method: str = "highs") -> LPResult:
        """
        Solve an Lp.

        Args:
            lp: Standard-form model from a builder
            method: linprog method name

        Returns:
            LPResult with solution and statistics
        """
        from scipy.optimize import linprog

        if method not in self.METHODS:
            raise ValueError(
                f"Unknown linprog method '{method}'. Available: {self.get_methods()}"
            )

        maximize = lp.optimization == Optimization.MAX
        c = -lp.c if maximize else lp.c

        # linprog rejects an empty equality system
        A_eq = lp.A if lp.n_rows > 0 else None
        b_eq = lp.b if lp.n_rows > 0 else None

        try:
            result = linprog(
                c,
                A_eq=A_eq,
                b_eq=b_eq,
                bounds=[(0, None)] * lp.n_columns,
                method=method,
            )
        except ValueError as e:
            logger.error(f"linprog failed: {e}")
            return LPResult.from_failure(f"linprog failed: {e}")

        if not result.success or result.x is None:
            logger.info(f"LP not solved: {result.message}")
            return LPResult.from_failure(str(result.message), raw_result=result)

        x = np.asarray(result.x)
        objective_value = float(lp.c @ x)
        values = {
            name: float(x[i]) for i, name in enumerate(lp.variable_names)
        }

        logger.info(
            f"LP solved with {method}: objective={objective_value:.6g} "
            f"after {getattr(result, 'nit', 0)} iterations"
        )

        return LPResult(
            success=True,
            message=str(result.message),
            x=x,
            objective_value=objective_value,
            values=values,
            n_iterations=int(getattr(result, "nit", 0)),
            raw_result=result,
        )


def solve_lp(lp: Lp, method: str = "highs") -> LPResult:
    """Convenience function: solve with the default backend."""
    return LinprogBackend().solve(lp, method=method)
