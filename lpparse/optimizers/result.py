"""
LP solve result.

Provides a result structure independent of the solver library, keyed by
the variable names of the parsed model.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import numpy as np


@dataclass
class LPResult:
    """
    Result from an LP backend.

    x covers every column of the Lp (declared variables then slacks);
    values only maps declared variable names.
    """

    # Status
    success: bool
    message: str

    # Solution
    x: Optional[np.ndarray]
    objective_value: float
    values: Dict[str, float] = field(default_factory=dict)

    # Statistics
    n_iterations: int = 0

    # Raw result from underlying solver (for advanced use)
    raw_result: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for display."""
        return {
            "success": self.success,
            "message": self.message,
            "x": self.x.tolist() if isinstance(self.x, np.ndarray) else None,
            "objective_value": float(self.objective_value),
            "values": dict(self.values),
            "n_iterations": self.n_iterations,
        }

    @classmethod
    def from_failure(cls, message: str, raw_result: Any = None) -> "LPResult":
        """Create a failure result."""
        return cls(
            success=False,
            message=message,
            x=None,
            objective_value=float("nan"),
            raw_result=raw_result,
        )
