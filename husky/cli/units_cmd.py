"""CLI commands for inspecting the unit conversion table."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from husky.core.conversions import default_table
from husky.utils.validation import Severity, validate_table

_SEVERITY_STYLE = {
    Severity.INFO: "dim",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


@click.group("units")
@click.pass_context
def units(ctx: click.Context) -> None:
    """List and check the available unit conversions."""
    pass


@units.command("list")
@click.option("--category", "-c", default=None, help="Only show this unit type.")
@click.pass_context
def units_list(ctx: click.Context, category: str | None) -> None:
    """List available conversions."""
    console: Console = ctx.obj.get("console", Console())
    table = default_table()

    if category is not None and category not in table:
        console.print(f"[red]Error:[/red] Don't know unit {category}!")
        raise SystemExit(1)

    out = Table(title="Unit Conversions")
    out.add_column("Unit Type", style="cyan")
    out.add_column("Key", style="green")
    out.add_column("Description", style="yellow")

    for name, key, record in table.entries():
        if category is None or name == category:
            out.add_row(name, key, record.description)
    console.print(out)


@units.command("check")
@click.option("--no-reference", is_flag=True, help="Skip the comparison with pint.")
@click.option("--all", "show_all", is_flag=True, help="Also show informational messages.")
@click.pass_context
def units_check(ctx: click.Context, no_reference: bool, show_all: bool) -> None:
    """Check the conversion table for consistency."""
    console: Console = ctx.obj.get("console", Console())
    result = validate_table(default_table(), reference=not no_reference)

    shown = [m for m in result.messages if show_all or m.severity != Severity.INFO]
    if shown:
        out = Table(title="Conversion Table Check")
        out.add_column("Severity")
        out.add_column("Entry", style="cyan")
        out.add_column("Message")
        for msg in shown:
            style = _SEVERITY_STYLE[msg.severity]
            out.add_row(f"[{style}]{msg.severity.value}[/{style}]", msg.parameter, msg.message)
        console.print(out)

    if not result.is_valid:
        console.print(f"[red]{len(result.errors)} error(s) found.[/red]")
        raise SystemExit(1)
    console.print("[green]Conversion table OK.[/green]")
