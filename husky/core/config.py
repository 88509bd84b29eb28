"""Session settings for the husky front end.

Settings come from command-line options only; nothing is read from or
written to disk.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PROMPT = "husky> "


@dataclass
class SessionConfig:
    """Settings shared by the REPL and the one-shot commands."""

    prompt: str = DEFAULT_PROMPT
    precision: int | None = None  # significant digits; None = full repr
    banner: bool = True

    def format_value(self, value: float) -> str:
        """Render a numeric result according to ``precision``."""
        if self.precision is None:
            return repr(float(value))
        return format(value, f".{self.precision}g")
