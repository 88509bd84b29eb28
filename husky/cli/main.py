"""husky command-line interface.

Entry point for the ``husky`` CLI tool. Without a sub-command the
interactive read-eval-print loop is started.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from husky import __app_name__, __version__
from husky.core.config import DEFAULT_PROMPT, SessionConfig

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=verbose)],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--precision",
    "-p",
    type=click.IntRange(1, 17),
    default=None,
    help="Significant digits in results (default: full precision).",
)
@click.option("--prompt", default=DEFAULT_PROMPT, show_default=True, help="REPL prompt.")
@click.option("--no-banner", is_flag=True, help="Start the REPL without the greeting.")
@click.pass_context
def cli(
    ctx: click.Context, verbose: bool, precision: int | None, prompt: str, no_banner: bool
) -> None:
    """husky — calculator with unit conversions.

    Evaluates arithmetic such as ``2 ^ 0.5 * (3 + 4)`` and conversions
    such as ``32 F to C`` or ``1 m to ft in Length``.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    ctx.obj["config"] = SessionConfig(prompt=prompt, precision=precision, banner=not no_banner)

    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


# Import and register sub-commands
from husky.cli.eval_cmd import convert, eval_expression  # noqa: E402
from husky.cli.repl_cmd import repl  # noqa: E402
from husky.cli.units_cmd import units  # noqa: E402

cli.add_command(repl)
cli.add_command(eval_expression)
cli.add_command(convert)
cli.add_command(units)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
