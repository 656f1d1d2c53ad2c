"""
Parse errors for the LP text notation.

Every error aborts the whole parse. The offending statement text is kept on
the exception so callers can report it.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for all parse failures."""

    def __init__(self, message: str, statement: Optional[str] = None):
        self.statement = statement
        if statement is not None:
            message = f"{message}: {statement!r}"
        super().__init__(message)


class MalformedStatement(ParseError):
    """Statement matches none of the recognized statement kinds."""
    pass


class MissingObjective(ParseError):
    """Document contains no objective statement."""

    def __init__(self, message: str = "No objective function provided"):
        super().__init__(message)


class UnmatchedPattern(ParseError):
    """Keyword present but a required part (name, terms, operator, constant) is missing."""
    pass


class InvalidNumericLiteral(ParseError):
    """A coefficient or constant cannot be read as a number."""

    def __init__(self, literal: str, statement: Optional[str] = None):
        self.literal = literal
        super().__init__(f"Invalid numeric literal {literal!r}", statement)


class DuplicateObjective(ParseError):
    """More than one objective statement under the 'error' policy."""
    pass
