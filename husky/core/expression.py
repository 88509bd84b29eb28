"""Arithmetic expression parsing and evaluation.

A recursive-descent (precedence climbing) parser that evaluates while it
parses; no syntax tree is built. Grammar, lowest to highest binding::

    expression := term (('+' | '-') term)*
    term       := power (('*' | '/') power)*
    power      := factor ('^' power)?
    factor     := '(' expression ')' | 'sqrt' '(' expression ')' | number
    number     := signed integer or decimal literal, optional exponent

All arithmetic is IEEE double precision via numpy: ``1/0`` is ``inf``
and ``sqrt(-1)`` is ``nan``. Neither is an error.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

import numpy as np

from husky.core.errors import ParseError

logger = logging.getLogger(__name__)

BinaryOp = Callable[[float, float], float]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_WORD_RE = re.compile(r"[A-Za-z]+")

_EXPECT_FACTOR = "number, '(' or 'sqrt'"
_EXPECT_SHALLOWER = "less deeply nested expression"

# parentheses, sqrt calls and chained '^' each add one level
MAX_NESTING = 100


def real_power(a: float, x: float) -> float:
    """Real power ``a^x = exp(x * ln a)`` for any real exponent.

    Evaluated with ``numpy.power`` rather than the log/exp identity, which
    loses precision for some inputs. Negative bases with non-integral
    exponents give ``nan``.
    """
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(a), np.float64(x)))


def real_power_logexp(a: float, x: float) -> float:
    """Fallback real power computed literally as ``exp(x * ln a)``.

    Kept for comparison with :func:`real_power`; not used by the parser.
    """
    with np.errstate(all="ignore"):
        return float(np.exp(np.float64(x) * np.log(np.float64(a))))


def square_root(x: float) -> float:
    """Non-negative square root; ``nan`` for negative input."""
    with np.errstate(all="ignore"):
        return float(np.sqrt(np.float64(x)))


def _ieee(op: Callable) -> BinaryOp:
    def apply(a: float, b: float) -> float:
        with np.errstate(all="ignore"):
            return float(op(np.float64(a), np.float64(b)))

    return apply


ADDITIVE_OPS: dict[str, BinaryOp] = {"+": _ieee(np.add), "-": _ieee(np.subtract)}
MULTIPLICATIVE_OPS: dict[str, BinaryOp] = {"*": _ieee(np.multiply), "/": _ieee(np.divide)}


class ExpressionParser:
    """Single-use parser over one line of text.

    :meth:`parse` evaluates the whole input. The lower-level methods let
    callers parse an expression prefix and continue with their own
    tokens (see :mod:`husky.core.dispatch`).
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    # --- Scanning helpers ---

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self) -> str | None:
        """Next non-blank character, or None at end of input."""
        self.skip_whitespace()
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def at_end(self) -> bool:
        return self.peek() is None

    def error(self, expected: str) -> ParseError:
        """Build a ParseError for the current position."""
        found = self.peek()
        return ParseError(self.pos, expected, found)

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.error(repr(char))
        self.pos += 1

    def word(self) -> str | None:
        """Consume and return a run of ASCII letters, if one follows."""
        self.skip_whitespace()
        match = _WORD_RE.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return match.group()

    def nested(self, parse: Callable[[], float]) -> float:
        """Run *parse* one nesting level deeper, bounded by MAX_NESTING."""
        if self.depth >= MAX_NESTING:
            raise self.error(_EXPECT_SHALLOWER)
        self.depth += 1
        try:
            return parse()
        finally:
            self.depth -= 1

    # --- Grammar ---

    def parse(self) -> float:
        """Evaluate the complete input as one expression."""
        value = self.expression()
        if not self.at_end():
            raise self.error("operator or end of input")
        return value

    def expression(self) -> float:
        value = self.term()
        op = self.peek()
        while op in ADDITIVE_OPS:
            self.pos += 1
            value = ADDITIVE_OPS[op](value, self.term())
            op = self.peek()
        return value

    def term(self) -> float:
        value = self.power()
        op = self.peek()
        while op in MULTIPLICATIVE_OPS:
            self.pos += 1
            value = MULTIPLICATIVE_OPS[op](value, self.power())
            op = self.peek()
        return value

    def power(self) -> float:
        base = self.factor()
        if self.peek() == "^":
            self.pos += 1
            # right-associative: 2^3^2 == 2^(3^2)
            return real_power(base, self.nested(self.power))
        return base

    def factor(self) -> float:
        char = self.peek()
        if char == "(":
            self.pos += 1
            value = self.nested(self.expression)
            self.expect(")")
            return value
        if self.text.startswith("sqrt", self.pos):
            self.pos += len("sqrt")
            self.expect("(")
            value = self.nested(self.expression)
            self.expect(")")
            return square_root(value)
        return self.number()

    def number(self) -> float:
        self.skip_whitespace()
        match = _NUMBER_RE.match(self.text, self.pos)
        if match is None:
            raise self.error(_EXPECT_FACTOR)
        self.pos = match.end()
        literal = match.group()
        if any(c in literal for c in ".eE"):
            return float(literal)
        try:
            return float(int(literal))
        except (OverflowError, ValueError):
            # too large for a double (or for int parsing): float() saturates to inf
            return float(literal)


def evaluate(text: str) -> float:
    """Parse and evaluate an arithmetic expression.

    Raises:
        ParseError: If *text* is not a well-formed expression.
    """
    try:
        return ExpressionParser(text).parse()
    except ParseError as e:
        logger.debug("Failed to parse %r: %s", text, e)
        raise
