"""Per-line dispatch between unit conversion and plain arithmetic.

A line is first read as a unit conversion::

    <expression> <unit> to <unit> [in <category>]

e.g. ``32 F to C`` or ``1 m to ft in Length``. Anything else is evaluated
as an arithmetic expression. Errors are caught here and returned as part
of the :class:`Evaluation`, so a bad line never ends the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from husky.core.config import SessionConfig
from husky.core.conversions import ConversionTable
from husky.core.errors import HuskyError, ParseError
from husky.core.expression import ExpressionParser, evaluate
from husky.core.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionRequest:
    """A parsed ``<value> <unit> to <unit> [in <category>]`` line."""

    value: float
    unit1: str
    unit2: str
    category: str | None = None


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating one input line."""

    value: float | None = None
    unit: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self, config: SessionConfig | None = None) -> str:
        if self.error is not None:
            return self.error
        config = config or SessionConfig()
        text = config.format_value(self.value)
        if self.unit is not None:
            text = f"{text} {self.unit}"
        return text


def parse_conversion(line: str) -> ConversionRequest | None:
    """Try to read *line* as a conversion request.

    Returns None when the line does not have the conversion shape. A
    malformed value expression in front of the units also yields None,
    so that the arithmetic parser reports the error.
    """
    parser = ExpressionParser(line)
    try:
        value = parser.expression()
    except ParseError:
        return None

    unit1 = parser.word()
    if unit1 is None or parser.word() != "to":
        return None
    unit2 = parser.word()
    if unit2 is None:
        return None

    category = None
    if not parser.at_end():
        if parser.word() != "in":
            return None
        category = parser.word()
        if category is None or not parser.at_end():
            return None

    return ConversionRequest(value, unit1, unit2, category)


def evaluate_line(line: str, table: ConversionTable | None = None) -> Evaluation | None:
    """Evaluate one input line.

    Args:
        line: Raw input text.
        table: Conversion table; defaults to the built-in one.

    Returns:
        The evaluation, or None for a blank line.
    """
    if not line.strip():
        return None

    try:
        request = parse_conversion(line)
        if request is not None:
            logger.debug("Dispatching %r as unit conversion", line)
            value, unit = resolve(
                request.unit1, request.unit2, request.value, request.category, table
            )
            return Evaluation(value=value, unit=unit)
        return Evaluation(value=evaluate(line))
    except HuskyError as e:
        return Evaluation(error=str(e))
