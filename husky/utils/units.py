"""Reference unit conversions backed by pint.

husky's own tables are plain functions keyed by short symbols. This module
maps those symbols onto pint unit names so the tables can be cross-checked
against an independent definition of each unit.
"""

from __future__ import annotations

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()

Q_ = _ureg.Quantity

# husky symbol → pint unit name
PINT_UNITS: dict[str, str] = {
    # temperature
    "C": "degC",
    "F": "degF",
    "K": "kelvin",
    # length
    "m": "meter",
    "km": "kilometer",
    "ft": "foot",
    "in": "inch",
    "mi": "mile",
    "yd": "yard",
    "nmi": "nautical_mile",
}


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


def split_key(key: str) -> tuple[str, str] | None:
    """Split a pair key into two symbols known to :data:`PINT_UNITS`.

    Returns None if no split yields two known symbols.
    """
    for i in range(1, len(key)):
        unit1, unit2 = key[:i], key[i:]
        if unit1 in PINT_UNITS and unit2 in PINT_UNITS:
            return unit1, unit2
    return None


def reference_convert(value: float, unit1: str, unit2: str) -> float | None:
    """Convert *value* from *unit1* to *unit2* using pint.

    Args:
        value: Numeric value in *unit1*.
        unit1: husky source symbol (e.g. "F", "mi").
        unit2: husky destination symbol.

    Returns:
        Converted value, or None if either symbol has no pint mapping.
    """
    if unit1 not in PINT_UNITS or unit2 not in PINT_UNITS:
        return None
    return Q_(value, PINT_UNITS[unit1]).to(PINT_UNITS[unit2]).magnitude
