from __future__ import annotations

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from arraystore.config import STORE_OPTIONS
from arraystore.identifier import (
    InvalidIdentifierError,
    generate_identifier,
    is_identifier,
    parse_identifier,
)

PRIMARY = "#87AFA3"


def uuid(
    count: int = typer.Option(
        1,
        "-n",
        "--count",
        min=1,
        help="Number of identifiers to print.",
    ),
    compact: bool = typer.Option(
        False,
        "--compact",
        help="Print 32 hex digits without hyphens.",
    ),
) -> None:
    """Print fresh version 4 identifiers."""
    fmt = "compact" if compact else STORE_OPTIONS.identifier_format
    for _ in range(count):
        typer.echo(generate_identifier(fmt))


def check(
    identifier: str = typer.Argument(..., help="Identifier in canonical or compact form."),
) -> None:
    """Show the fields of an identifier and whether it is a valid v4 identifier."""
    console = Console()

    try:
        fields = parse_identifier(identifier)
    except InvalidIdentifierError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(
        title=fields.format("canonical"),
        box=box.ASCII_DOUBLE_HEAD,
        title_style=f"bold {PRIMARY}",
        title_justify="left",
    )
    table.add_column("field", overflow="fold")
    table.add_column("value", justify="right", style="bold cyan")

    table.add_row("time_low", f"{fields.time_low:08x}")
    table.add_row("time_mid", f"{fields.time_mid:04x}")
    table.add_row("time_hi_version", f"{fields.time_hi_version:04x}")
    table.add_row("clock_seq", f"{fields.clock_seq:04x}")
    table.add_row("node", f"{fields.node:012x}")
    table.add_row("version", str(fields.version))
    table.add_row("variant", f"{fields.variant:02b}")
    console.print(table)

    if not is_identifier(identifier):
        console.print("[yellow]not a version 4 identifier[/yellow]")
        raise typer.Exit(code=1)
