"""Solver backends for built LP models."""

from .result import LPResult
from .linprog_backend import LinprogBackend, solve_lp

__all__ = [
    "LPResult",
    "LinprogBackend",
    "solve_lp",
]
