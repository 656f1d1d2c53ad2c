"""
Parser for the LP text notation.

A document is a sequence of ';'-terminated statements:

    # comments are any statement containing '#';
    var television;
    maximize revenue: 100000*television + 40000*newspaper;
    subject to budget: 20*television + 6*newspaper <= 182;

Pipeline (single pass, statements are independent):
- split_statements: cut on ';', trim, drop empty pieces
- classify_statement: comment > declaration > objective > constraint
- parse_declaration / parse_objective / parse_constraint, built on parse_terms
- LPParser.parse: bucket results into one Components value

Classification is substring based, so a constraint named e.g. 'variance'
is classified as a declaration and then rejected by the declaration parser.
"""

import re
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from ..builder import BuilderBase, Lp, StandardFormBuilder
from ..formulation.schema import (
    Components,
    Constraint,
    Objective,
    Relation,
    WeightedVariable,
)
from .config import ParserConfig
from .errors import (
    DuplicateObjective,
    InvalidNumericLiteral,
    MalformedStatement,
    MissingObjective,
    UnmatchedPattern,
)

logger = logging.getLogger(__name__)

STATEMENT_TERMINATOR = ";"
COMMENT_MARKER = "#"
DECLARATION_KEYWORD = "var"
MINIMIZE_KEYWORD = "minimize"
MAXIMIZE_KEYWORD = "maximize"
CONSTRAINT_KEYWORD = "subject to"

_IDENTIFIER = r"[^\W\d]\w*"
_IDENTIFIER_RE = re.compile(_IDENTIFIER)
_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?")

_DECLARATION_RE = re.compile(rf"var\s+(?P<name>{_IDENTIFIER})")
_OBJECTIVE_RE = re.compile(
    rf"(?P<direction>minimize|maximize)\s+(?P<name>{_IDENTIFIER})\s*:(?P<body>.*)",
    re.DOTALL,
)
_CONSTRAINT_RE = re.compile(
    rf"subject\s+to\s+(?P<name>{_IDENTIFIER})\s*:(?P<body>.*)",
    re.DOTALL,
)

_OPERATOR_CHARS = "<>="
_STRICT_OPERATORS = {"<=", ">=", "=="}


class StatementKind(str, Enum):
    """Kind of a statement, decided by keyword precedence."""

    COMMENT = "comment"
    DECLARATION = "declaration"
    OBJECTIVE = "objective"
    CONSTRAINT = "constraint"


def split_statements(text: str) -> List[str]:
    """Split a document into trimmed, non-empty statements."""
    pieces = (piece.strip() for piece in text.split(STATEMENT_TERMINATOR))
    return [piece for piece in pieces if piece]


def classify_statement(statement: str) -> StatementKind:
    """
    Classify a statement by the first keyword marker it contains.

    Raises:
        MalformedStatement: if no marker is found
    """
    if COMMENT_MARKER in statement:
        return StatementKind.COMMENT
    if DECLARATION_KEYWORD in statement:
        return StatementKind.DECLARATION
    if MINIMIZE_KEYWORD in statement or MAXIMIZE_KEYWORD in statement:
        return StatementKind.OBJECTIVE
    if CONSTRAINT_KEYWORD in statement:
        return StatementKind.CONSTRAINT

    raise MalformedStatement("Unknown statement type", statement)


def resolve_relation(token: str, strict: bool = False) -> Relation:
    """
    Map an operator token to a Relation.

    Lenient mode looks for '<' then '>' anywhere in the token and falls back
    to EQUAL, so '<', '=<' and '<=' all mean LESS_OR_EQUAL. Strict mode only
    accepts '<=', '>=' and '=='.
    """
    if strict and token not in _STRICT_OPERATORS:
        raise UnmatchedPattern(f"Unsupported relational operator {token!r}")

    if "<" in token:
        return Relation.LESS_OR_EQUAL
    elif ">" in token:
        return Relation.GREATER_OR_EQUAL
    return Relation.EQUAL


def _parse_number(literal: str, statement: Optional[str]) -> float:
    if not _NUMBER_RE.fullmatch(literal):
        raise InvalidNumericLiteral(literal, statement)
    return float(literal)


def parse_term(term: str, statement: Optional[str] = None) -> WeightedVariable:
    """
    Parse one term: [-][coefficient *]name.

    Args:
        term: Term text, e.g. "-0.5*c", "3 * x", "y"
        statement: Enclosing statement, used in error messages

    Returns:
        WeightedVariable with coefficient = magnitude * sign
    """
    statement = statement if statement is not None else term
    rest = term.strip()
    if not rest:
        raise UnmatchedPattern("Empty term", statement)

    sign = 1.0
    if rest.startswith("-"):
        sign = -1.0
        rest = rest[1:].strip()

    magnitude = 1.0
    if "*" in rest:
        literal, _, rest = rest.partition("*")
        literal = literal.strip()
        rest = rest.strip()
        if not literal:
            raise UnmatchedPattern("Missing coefficient before '*'", statement)
        magnitude = _parse_number(literal, statement)

    if not _IDENTIFIER_RE.fullmatch(rest):
        raise UnmatchedPattern("Term has no variable name", statement)

    return WeightedVariable(name=rest, coefficient=magnitude * sign)


def parse_terms(expression: str, statement: Optional[str] = None) -> List[WeightedVariable]:
    """
    Parse a sum of terms joined by '+'.

    There is no subtraction operator: write "a + -2*b". Order and repeated
    names are preserved as written.
    """
    statement = statement if statement is not None else expression
    if not expression.strip():
        raise UnmatchedPattern("Missing terms", statement)
    return [parse_term(term, statement) for term in expression.split("+")]


def parse_declaration(statement: str) -> WeightedVariable:
    """Parse 'var name' into a WeightedVariable with coefficient 0.0."""
    match = _DECLARATION_RE.fullmatch(statement.strip())
    if match is None:
        raise UnmatchedPattern("Invalid variable declaration", statement)
    return WeightedVariable(name=match["name"], coefficient=0.0)


def parse_objective(statement: str) -> Objective:
    """Parse 'minimize|maximize name: terms' into an Objective."""
    match = _OBJECTIVE_RE.fullmatch(statement.strip())
    if match is None:
        raise UnmatchedPattern("Invalid objective", statement)

    return Objective(
        name=match["name"],
        terms=parse_terms(match["body"], statement),
        maximize=match["direction"] == MAXIMIZE_KEYWORD,
    )


def parse_constraint(statement: str, strict_relations: bool = False) -> Constraint:
    """
    Parse 'subject to name: terms OP constant' into a Constraint.

    OP is the first run of '<', '>', '=' characters after the colon.
    The constant may carry a leading '-'.
    """
    match = _CONSTRAINT_RE.fullmatch(statement.strip())
    if match is None:
        raise UnmatchedPattern("Invalid constraint", statement)

    body = match["body"]
    start = next((i for i, ch in enumerate(body) if ch in _OPERATOR_CHARS), None)
    if start is None:
        raise UnmatchedPattern("Missing relational operator", statement)

    end = start
    while end < len(body) and body[end] in _OPERATOR_CHARS:
        end += 1

    lhs = body[:start]
    token = body[start:end]
    constant_text = body[end:].strip()

    if not lhs.strip():
        raise UnmatchedPattern("Missing terms", statement)
    if not constant_text:
        raise UnmatchedPattern("Missing constant", statement)
    if any(ch in _OPERATOR_CHARS for ch in constant_text):
        raise UnmatchedPattern("More than one relational operator", statement)

    try:
        relation = resolve_relation(token, strict=strict_relations)
    except UnmatchedPattern as e:
        raise UnmatchedPattern(str(e), statement) from e

    negative = constant_text.startswith("-")
    magnitude_text = constant_text[1:].strip() if negative else constant_text
    if not _NUMBER_RE.fullmatch(magnitude_text):
        raise InvalidNumericLiteral(constant_text, statement)
    constant = float(magnitude_text)

    return Constraint(
        name=match["name"],
        terms=parse_terms(lhs, statement),
        constant=-constant if negative else constant,
        relation=relation,
    )


class LPParser:
    """Parse LP text notation into Components."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize parser.

        Args:
            config: Policy switches (default: lenient ParserConfig())
        """
        self.config = config or ParserConfig()

    def parse(self, text: str) -> Components:
        """
        Parse a whole document.

        Raises:
            ParseError subclass on the first malformed statement, or
            MissingObjective if the document has no objective.
        """
        statements = split_statements(text)

        variables: List[WeightedVariable] = []
        constraints: List[Constraint] = []
        objective: Optional[Objective] = None

        for statement in statements:
            kind = classify_statement(statement)

            if kind is StatementKind.COMMENT:
                continue
            elif kind is StatementKind.DECLARATION:
                variables.append(parse_declaration(statement))
            elif kind is StatementKind.CONSTRAINT:
                constraints.append(
                    parse_constraint(statement, strict_relations=self.config.strict_relations)
                )
            elif kind is StatementKind.OBJECTIVE:
                parsed = parse_objective(statement)
                if objective is not None:
                    if self.config.duplicate_objective == "error":
                        raise DuplicateObjective("Multiple objective statements", statement)
                    logger.debug(f"Objective '{objective.name}' replaced by '{parsed.name}'")
                objective = parsed

        if objective is None:
            raise MissingObjective()

        logger.debug(
            f"Parsed {len(statements)} statements: {len(variables)} variables, "
            f"{len(constraints)} constraints, objective '{objective.name}'"
        )

        return Components(
            variables=variables,
            constraints=constraints,
            objective=objective,
        )

    def parse_file(self, path: Union[str, Path]) -> Components:
        """Read a UTF-8 document from disk and parse it."""
        path = Path(path)
        logger.debug(f"Reading LP document from {path}")
        return self.parse(path.read_text(encoding="utf-8"))


def parse_components(text: str, config: Optional[ParserConfig] = None) -> Components:
    """Convenience function: parse a document string."""
    return LPParser(config).parse(text)


def parse_components_from_file(
    path: Union[str, Path],
    config: Optional[ParserConfig] = None
) -> Components:
    """Convenience function: parse a document file."""
    return LPParser(config).parse_file(path)


def build_lp(components: Components, builder: Optional[BuilderBase] = None) -> Lp:
    """
    Feed parsed components to a builder and build.

    Order: variables, constraints, then the objective.
    """
    builder = builder if builder is not None else StandardFormBuilder()

    for var in components.variables:
        builder.add_variable(var)

    for cons in components.constraints:
        builder.add_constraint(cons)

    builder.add_objective(components.objective)

    return builder.build()


def lp_from_text(
    text: str,
    builder: Optional[BuilderBase] = None,
    config: Optional[ParserConfig] = None
) -> Lp:
    """
    Parse a document and build the numeric LP.

    Components are fed to the builder in order: variables, constraints,
    then the objective.

    Args:
        text: LP document
        builder: BuilderBase instance (default: StandardFormBuilder)
        config: Parser configuration

    Returns:
        Lp assembled by builder.build()
    """
    return build_lp(parse_components(text, config), builder)


def lp_from_file(
    path: Union[str, Path],
    builder: Optional[BuilderBase] = None,
    config: Optional[ParserConfig] = None
) -> Lp:
    """Read a document file and build the numeric LP."""
    return lp_from_text(Path(path).read_text(encoding="utf-8"), builder, config)
