"""
lpparse - text notation for linear programs

    from lpparse import parse_components, lp_from_text, solve_lp

    text = '''
        var x;
        var y;
        maximize profit: 3*x + 2*y;
        subject to capacity: x + y <= 4;
        subject to labour: x + 3*y <= 6;
    '''

    components = parse_components(text)   # structured model
    lp = lp_from_text(text)                # A, b, c, optimization
    result = solve_lp(lp)                  # scipy linprog
"""

__version__ = "0.1.0"

from .formulation import (
    Relation,
    WeightedVariable,
    Constraint,
    Objective,
    Components,
)
from .modeling import (
    ParserConfig,
    ParseError,
    MalformedStatement,
    MissingObjective,
    UnmatchedPattern,
    InvalidNumericLiteral,
    DuplicateObjective,
    LPParser,
    parse_components,
    parse_components_from_file,
    build_lp,
    lp_from_text,
    lp_from_file,
)
from .builder import BuilderBase, BuildError, Lp, Optimization, StandardFormBuilder
from .optimizers import LPResult, LinprogBackend, solve_lp

__all__ = [
    # Model
    "Relation",
    "WeightedVariable",
    "Constraint",
    "Objective",
    "Components",
    # Parsing
    "ParserConfig",
    "ParseError",
    "MalformedStatement",
    "MissingObjective",
    "UnmatchedPattern",
    "InvalidNumericLiteral",
    "DuplicateObjective",
    "LPParser",
    "parse_components",
    "parse_components_from_file",
    "build_lp",
    "lp_from_text",
    "lp_from_file",
    # Building
    "BuilderBase",
    "BuildError",
    "Lp",
    "Optimization",
    "StandardFormBuilder",
    # Solving
    "LPResult",
    "LinprogBackend",
    "solve_lp",
]
