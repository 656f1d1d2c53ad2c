"""Builders that turn parsed Components into numeric LP models."""

from .base import BuilderBase, BuildError, Lp, Optimization
from .standard_form import StandardFormBuilder

__all__ = [
    "BuilderBase",
    "BuildError",
    "Lp",
    "Optimization",
    "StandardFormBuilder",
]
