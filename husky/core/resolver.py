"""Unit conversion resolution.

Given two unit symbols, an optional category and a value, find the
matching :class:`~husky.core.conversions.ConversionRecord` and apply it.

There are two paths:

1. No category given: every category is scanned for the pair key. Zero
   matches is an error, one match is applied, and more than one match is
   rejected as ambiguous. There is no priority order between categories;
   the caller has to name one.
2. A category is given: only that category is consulted.
"""

from __future__ import annotations

import logging

from husky.core.conversions import ConversionRecord, ConversionTable, default_table
from husky.core.errors import AmbiguousConversion, NoConversionFound, UnknownCategory

logger = logging.getLogger(__name__)


def make_key(unit1: str, unit2: str) -> str:
    """Pair key for converting *unit1* into *unit2* (plain concatenation)."""
    return unit1 + unit2


def find_conversions(
    unit1: str, unit2: str, table: ConversionTable | None = None
) -> list[tuple[str, ConversionRecord]]:
    """Scan all categories for the pair key of *unit1* → *unit2*.

    Returns:
        ``(category, record)`` for every category containing the key, in
        table order.
    """
    if table is None:
        table = default_table()
    key = make_key(unit1, unit2)
    matches: list[tuple[str, ConversionRecord]] = []
    for category, units in table.items():
        record = units.get(key)
        if record is not None:
            matches.append((category, record))
    logger.debug("Pair key %r matched in %d categories", key, len(matches))
    return matches


def resolve(
    unit1: str,
    unit2: str,
    value: float,
    category: str | None = None,
    table: ConversionTable | None = None,
) -> tuple[float, str]:
    """Convert *value* from *unit1* to *unit2*.

    Args:
        unit1: Source unit symbol (case-sensitive).
        unit2: Destination unit symbol (case-sensitive).
        value: Value expressed in *unit1*.
        category: Optional category restricting the lookup.
        table: Conversion table; defaults to the built-in one.

    Returns:
        ``(converted_value, unit2)``.

    Raises:
        UnknownCategory: *category* is not in the table.
        NoConversionFound: The pair key is absent from the searched scope.
        AmbiguousConversion: No category given and the key exists in more
            than one category.
    """
    if table is None:
        table = default_table()

    if category is None:
        matches = find_conversions(unit1, unit2, table)
        if len(matches) == 0:
            raise NoConversionFound(unit1, unit2)
        if len(matches) > 1:
            raise AmbiguousConversion(unit1, unit2, [name for name, _ in matches])
        _, record = matches[0]
        return record(value), unit2

    units = table.get(category)
    if units is None:
        raise UnknownCategory(category)
    record = units.get(make_key(unit1, unit2))
    if record is None:
        raise NoConversionFound(unit1, unit2, category)
    logger.debug("Converting %r via %s (%s)", value, category, record.description)
    return record(value), unit2
