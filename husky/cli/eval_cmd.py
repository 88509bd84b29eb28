"""One-shot evaluation commands."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from husky.cli.repl_cmd import print_evaluation
from husky.core.config import SessionConfig
from husky.core.dispatch import evaluate_line
from husky.core.errors import AmbiguousConversion, HuskyError
from husky.core.expression import evaluate
from husky.core.resolver import resolve


@click.command("eval", context_settings={"ignore_unknown_options": True})
@click.argument("expression", nargs=-1, required=True)
@click.pass_context
def eval_expression(ctx: click.Context, expression: tuple[str, ...]) -> None:
    """Evaluate one line, e.g. ``husky eval 2 + 3 * 4`` or ``husky eval 32 F to C``."""
    console: Console = ctx.obj.get("console", Console())
    config: SessionConfig = ctx.obj.get("config", SessionConfig())

    evaluation = evaluate_line(" ".join(expression))
    if evaluation is None:
        console.print("[red]Error:[/red] Nothing to evaluate.")
        raise SystemExit(1)

    print_evaluation(console, evaluation, config)
    if not evaluation.ok:
        raise SystemExit(1)


@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("unit1")
@click.argument("unit2")
@click.option("--category", "-c", default=None, help="Unit type, e.g. Temp or Length.")
@click.pass_context
def convert(
    ctx: click.Context, value: str, unit1: str, unit2: str, category: str | None
) -> None:
    """Convert VALUE from UNIT1 to UNIT2. VALUE may be an expression."""
    console: Console = ctx.obj.get("console", Console())
    config: SessionConfig = ctx.obj.get("config", SessionConfig())

    try:
        converted, unit = resolve(unit1, unit2, evaluate(value), category)
    except AmbiguousConversion as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        console.print(f"[dim]Matching unit types: {', '.join(e.categories)}[/dim]")
        raise SystemExit(1)
    except HuskyError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    console.print(f"{config.format_value(converted)} {unit}", markup=False, highlight=False)
