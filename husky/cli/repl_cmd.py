"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from husky import __app_name__, __version__
from husky.core.config import SessionConfig
from husky.core.conversions import ConversionTable
from husky.core.dispatch import Evaluation, evaluate_line

logger = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit", ":q"})


def print_evaluation(console: Console, evaluation: Evaluation, config: SessionConfig) -> None:
    """Print a result, or an error in red."""
    if evaluation.ok:
        console.print(evaluation.render(config), markup=False, highlight=False)
    else:
        console.print(f"[red]Error:[/red] {escape(evaluation.error)}", highlight=False)


def run_repl(
    console: Console, config: SessionConfig, table: ConversionTable | None = None
) -> int:
    """Read and evaluate lines until EOF or a quit command.

    Returns:
        Number of lines evaluated.
    """
    count = 0
    while True:
        try:
            line = console.input(Text(config.prompt))
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() in QUIT_COMMANDS:
            break

        evaluation = evaluate_line(line, table)
        if evaluation is None:
            continue
        count += 1
        print_evaluation(console, evaluation, config)

    logger.debug("Session ended after %d evaluations", count)
    return count


@click.command("repl")
@click.option("--no-banner", is_flag=True, help="Do not print the greeting.")
@click.pass_context
def repl(ctx: click.Context, no_banner: bool) -> None:
    """Start the interactive calculator."""
    console: Console = ctx.obj.get("console", Console())
    config: SessionConfig = ctx.obj.get("config", SessionConfig())

    if config.banner and not no_banner:
        console.print(
            f"[bold]{__app_name__} {__version__}[/bold]  "
            "[dim]e.g. 2 ^ 0.5, sqrt(16), 32 F to C, 1 m to ft in Length; quit to exit[/dim]",
            highlight=False,
        )
    run_repl(console, config)
