"""
Entry point for running the LP CLI as a module.

Usage:
    python -m lpparse.cli problem.lp
    python -m lpparse.cli problem.lp --solve
    python -m lpparse.cli problem.lp --solve --method highs-ds --strict --verbose
"""

import sys
import logging
from dataclasses import replace

from rich.console import Console
from rich.markup import escape

from ..builder import StandardFormBuilder
from ..modeling import LPParser, ParserConfig, build_lp
from ..optimizers import LinprogBackend
from .commands import CommandHandler

USAGE = "Usage: python -m lpparse.cli FILE [--solve] [--strict] [--method NAME] [--verbose]"


def run(argv: list[str], console: Console) -> int:
    """Run the CLI with explicit arguments; returns the exit status."""
    path = None
    solve = False
    strict = False
    verbose = False
    method = "highs"

    i = 0
    while i < len(argv):
        if argv[i] == "--solve":
            solve = True
            i += 1
        elif argv[i] == "--strict":
            strict = True
            i += 1
        elif argv[i] == "--verbose":
            verbose = True
            i += 1
        elif argv[i] == "--method":
            if i + 1 >= len(argv) or argv[i + 1].startswith("--"):
                console.print(f"[red]Missing value for --method[/red]\n{USAGE}")
                return 2
            method = argv[i + 1]
            i += 2
        elif argv[i].startswith("--"):
            console.print(f"[red]Unknown option: {argv[i]}[/red]\n{USAGE}")
            return 2
        else:
            path = argv[i]
            i += 1

    if path is None:
        console.print(USAGE)
        return 2

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    try:
        config = ParserConfig.from_env()
        if strict:
            config = replace(config, strict_relations=True)

        components = LPParser(config).parse_file(path)
        lp = build_lp(components, StandardFormBuilder())
    except OSError as e:
        console.print(f"[red]Cannot read {escape(path)}: {escape(str(e))}[/red]")
        return 1
    except ValueError as e:  # ParseError, BuildError, bad LPPARSE_* settings
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    handler = CommandHandler(console)
    handler.handle_components(components)
    handler.handle_matrices(lp)

    if solve:
        try:
            result = LinprogBackend().solve(lp, method=method)
        except ValueError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            return 1
        handler.handle_solution(result)
        if not result.success:
            return 1

    return 0


def main():
    """Main entry point for CLI."""
    sys.exit(run(sys.argv[1:], Console()))


if __name__ == "__main__":
    main()
