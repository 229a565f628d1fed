"""
Command-line interface for infix-calc.

Evaluates one expression given as a positional argument:

    infix-calc "1 + 2 * 3"
    infix-calc --tokens --rpn "(1 + 2) * 3"
    infix-calc --json "2 ^ 3 ^ 2"

Expressions starting with '-' must follow '--' so they are not read as options.
"""

from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from infix_calc import __version__
from infix_calc.config import configure_logging, settings
from infix_calc.errors import CalculatorError
from infix_calc.models import Associativity, Token, TokenKind
from infix_calc.pipeline import analyze

app = typer.Typer(
    name="infix-calc",
    help="Evaluate infix arithmetic expressions with the shunting-yard algorithm",
    add_completion=False,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


@app.command()
def main(
    expressions: Optional[List[str]] = typer.Argument(
        None, help="The expression to evaluate (exactly one)"
    ),
    show_tokens: bool = typer.Option(False, "--tokens", "-t", help="Print the token table"),
    show_rpn: bool = typer.Option(False, "--rpn", "-r", help="Print the postfix sequence"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print the full result as JSON"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Reject unbalanced parentheses and leftover operands"
    ),
    power_assoc: Optional[Associativity] = typer.Option(
        None, "--power-assoc", case_sensitive=False, help="Associativity of '^'"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level"),
):
    """Evaluate an infix arithmetic expression."""
    try:
        configure_logging(log_level)
    except ValueError as e:
        err_console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    if not expressions or len(expressions) != 1:
        err_console.print("[red]Input is missing or malformed:[/] expected exactly one expression")
        raise typer.Exit(1)

    try:
        result = analyze(
            expressions[0],
            strict=strict,
            power_associativity=power_assoc,
        )
    except CalculatorError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    if show_tokens:
        console.print(_token_table(result.tokens))
    if show_rpn:
        console.print(f"[bold]RPN:[/] {' '.join(t.text for t in result.postfix)}")

    typer.echo(repr(result.value))


# =============================================================================
# Helpers
# =============================================================================

def _token_table(tokens: List[Token]) -> Table:
    """Build a table listing each token with its kind and precedence."""
    table = Table(title=f"Tokens ({settings.app_name} {__version__})")
    table.add_column("Text", style="cyan")
    table.add_column("Kind", style="magenta")
    table.add_column("Position", style="dim")
    table.add_column("Precedence", style="green")

    for token in tokens:
        table.add_row(
            token.text,
            token.kind.value,
            str(token.position),
            str(token.precedence) if token.kind == TokenKind.OPERATOR else "-",
        )

    return table


if __name__ == "__main__":
    app()
