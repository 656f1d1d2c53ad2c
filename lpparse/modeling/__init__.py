"""Text-to-model parsing for the LP notation."""

from .config import ParserConfig
from .errors import (
    ParseError,
    MalformedStatement,
    MissingObjective,
    UnmatchedPattern,
    InvalidNumericLiteral,
    DuplicateObjective,
)
from .parsers import (
    LPParser,
    StatementKind,
    split_statements,
    classify_statement,
    resolve_relation,
    parse_term,
    parse_terms,
    parse_declaration,
    parse_objective,
    parse_constraint,
    parse_components,
    parse_components_from_file,
    build_lp,
    lp_from_text,
    lp_from_file,
)

__all__ = [
    "ParserConfig",
    "ParseError",
    "MalformedStatement",
    "MissingObjective",
    "UnmatchedPattern",
    "InvalidNumericLiteral",
    "DuplicateObjective",
    "LPParser",
    "StatementKind",
    "split_statements",
    "classify_statement",
    "resolve_relation",
    "parse_term",
    "parse_terms",
    "parse_declaration",
    "parse_objective",
    "parse_constraint",
    "parse_components",
    "parse_components_from_file",
    "build_lp",
    "lp_from_text",
    "lp_from_file",
]
