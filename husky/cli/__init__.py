"""husky command-line interface package.

Supports ``python -m husky`` as an alternative to the ``husky`` entry point.
"""

from husky.cli.main import cli, main

__all__ = ["cli", "main"]
