"""Command-line front end: parse, display, optionally solve an LP file."""

from .commands import CommandHandler, format_terms

__all__ = ["CommandHandler", "format_terms"]
