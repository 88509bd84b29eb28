"""Exception taxonomy for husky.

Every error is local to one evaluation; ``str(exc)`` is the message shown
to the user.
"""

from __future__ import annotations


class HuskyError(Exception):
    """Base class for all evaluation errors."""


class ParseError(HuskyError):
    """Malformed expression text.

    Args:
        position: 0-based offset into the input where parsing stopped.
        expected: Description of what the parser expected there.
        found: The offending input, or ``None`` at end of input.
    """

    def __init__(self, position: int, expected: str, found: str | None = None):
        self.position = position
        self.expected = expected
        self.found = found
        unexpected = "end of input" if found is None else repr(found)
        super().__init__(
            f"Parse error at column {position + 1}: unexpected {unexpected}, "
            f"expecting {expected}"
        )


class UnknownCategory(HuskyError):
    """The unit category hint is not present in the registry."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Don't know unit {category}!")


class NoConversionFound(HuskyError):
    """No conversion for a unit pair within the searched scope."""

    def __init__(self, unit1: str, unit2: str, category: str | None = None):
        self.unit1 = unit1
        self.unit2 = unit2
        self.category = category
        message = f"No unit conversion known for {unit1} to {unit2}!"
        if category is not None:
            message = f"In {category} :: {message}"
        super().__init__(message)


class AmbiguousConversion(HuskyError):
    """A unit pair matched in more than one category and no hint was given."""

    def __init__(self, unit1: str, unit2: str, categories: list[str]):
        self.unit1 = unit1
        self.unit2 = unit2
        self.categories = list(categories)
        super().__init__(
            "More than one unit conversion matched.\n"
            "Consider disambiguating with an explicit unit type."
        )
