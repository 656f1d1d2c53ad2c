"""Command handlers for CLI - pure presentation of parsed and built models."""

from rich.console import Console
from rich.table import Table

from ..builder import Lp
from ..formulation.schema import Components, WeightedVariable
from ..optimizers import LPResult


def format_terms(terms: list[WeightedVariable]) -> str:
    """Render terms back in the input notation."""
    return " + ".join(f"{term.coefficient:g}*{term.name}" for term in terms)


class CommandHandler:
    """
    Renders components, matrices and solutions.
    Pure presentation logic - no parsing or solving here.
    """

    def __init__(self, console: Console):
        self.console = console

    def handle_components(self, components: Components):
        """Display declared variables, objective and constraints."""
        objective = components.objective
        direction = "maximize" if objective.maximize else "minimize"

        self.console.print(
            f"\n[bold]{direction}[/bold] [cyan]{objective.name}[/cyan]: "
            f"{format_terms(objective.terms)}"
        )
        self.console.print(
            f"[dim]Variables:[/dim] {', '.join(components.variable_names) or '-'}\n"
        )

        if not components.constraints:
            self.console.print("[dim]No constraints[/dim]\n")
            return

        table = Table(title="Constraints")
        table.add_column("Name", style="cyan")
        table.add_column("Terms")
        table.add_column("Relation", justify="center")
        table.add_column("Constant", justify="right")

        for cons in components.constraints:
            table.add_row(
                cons.name,
                format_terms(cons.terms),
                cons.relation.value,
                f"{cons.constant:g}",
            )

        self.console.print(table)

    def handle_matrices(self, lp: Lp):
        """Display the standard-form tableau [A | b] with c as the last row."""
        table = Table(title=f"Standard form ({lp.optimization.value})")
        table.add_column("Row", style="cyan")
        for name in lp.column_names:
            table.add_column(name, justify="right")
        table.add_column("b", justify="right", style="bold")

        for i in range(lp.n_rows):
            table.add_row(
                str(i + 1),
                *(f"{value:g}" for value in lp.A[i]),
                f"{lp.b[i]:g}",
            )

        table.add_row("c", *(f"{value:g}" for value in lp.c), "", style="magenta")
        self.console.print(table)

    def handle_solution(self, result: LPResult):
        """Display solver outcome."""
        if not result.success:
            self.console.print(f"\n[red]✗ Not solved:[/red] {result.message}\n")
            return

        table = Table(title="Solution")
        table.add_column("Variable", style="cyan")
        table.add_column("Value", justify="right")

        for name, value in result.values.items():
            table.add_row(name, f"{value:.6g}")

        self.console.print(table)
        self.console.print(
            f"[green]✓[/green] Objective value: [bold]{result.objective_value:.6g}[/bold] "
            f"[dim]({result.n_iterations} iterations)[/dim]\n"
        )
