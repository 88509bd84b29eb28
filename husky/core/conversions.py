"""Static table of unit conversions.

Conversions are organised two levels deep: unit category (``"Temp"``,
``"Length"``) → pair key → :class:`ConversionRecord`. A pair key is the
source unit symbol immediately followed by the destination unit symbol,
e.g. ``"FC"`` for Fahrenheit → Celsius or ``"mft"`` for meter → foot.

The same pair key may legitimately appear in more than one category;
:mod:`husky.core.resolver` treats that as an ambiguity when no category
is given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from husky.utils.constants import (
    FOOT_TO_M,
    INCH_TO_M,
    MILE_TO_KM,
    MILE_TO_M,
    NAUTICAL_MILE_TO_KM,
    NAUTICAL_MILE_TO_M,
    T_CELSIUS_OFFSET,
    T_FAHRENHEIT_FREEZE,
    T_RANKINE_OFFSET,
    YARD_TO_M,
)

logger = logging.getLogger(__name__)

Converter = Callable[[float], float]


@dataclass(frozen=True)
class ConversionRecord:
    """A single directional unit conversion."""

    converter: Converter
    description: str

    def __call__(self, value: float) -> float:
        return self.converter(value)


class ConversionTable:
    """Immutable category → pair key → record mapping.

    Args:
        categories: Mapping of category name to a mapping of pair key to
            :class:`ConversionRecord`. The input is copied; later changes
            to it do not affect the table.
    """

    def __init__(self, categories: Mapping[str, Mapping[str, ConversionRecord]]):
        self._categories: Mapping[str, Mapping[str, ConversionRecord]] = MappingProxyType(
            {name: MappingProxyType(dict(units)) for name, units in categories.items()}
        )

    def categories(self) -> list[str]:
        """Return all category names in registration order."""
        return list(self._categories.keys())

    def get(self, category: str) -> Mapping[str, ConversionRecord] | None:
        """Return the read-only pair-key mapping of *category*, or None."""
        return self._categories.get(category)

    def lookup(self, category: str, key: str) -> ConversionRecord | None:
        """Return the record stored under *key* in *category*, or None."""
        units = self._categories.get(category)
        if units is None:
            return None
        return units.get(key)

    def items(self) -> Iterator[tuple[str, Mapping[str, ConversionRecord]]]:
        return iter(self._categories.items())

    def entries(self) -> Iterator[tuple[str, str, ConversionRecord]]:
        """Iterate over ``(category, pair_key, record)`` for every conversion."""
        for category, units in self._categories.items():
            for key, record in units.items():
                yield category, key, record

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        counts = ", ".join(f"{name}={len(units)}" for name, units in self._categories.items())
        return f"ConversionTable({counts})"


# --- Temperature ---
# Formulas from NIST SP 811, appendix B.9 (temperature).

TEMP_CONVERSIONS: dict[str, ConversionRecord] = {
    "FC": ConversionRecord(
        lambda x: (x - T_FAHRENHEIT_FREEZE) * 5 / 9,
        "Fahrenheit to Celsius",
    ),
    "CF": ConversionRecord(
        lambda x: x * 9 / 5 + T_FAHRENHEIT_FREEZE,
        "Celsius to Fahrenheit",
    ),
    "CK": ConversionRecord(lambda x: x + T_CELSIUS_OFFSET, "Celsius to Kelvin"),
    "KC": ConversionRecord(lambda x: x - T_CELSIUS_OFFSET, "Kelvin to Celsius"),
    "FK": ConversionRecord(
        lambda x: (x + T_RANKINE_OFFSET) * 5 / 9,
        "Fahrenheit to Kelvin",
    ),
    "KF": ConversionRecord(
        lambda x: x * 9 / 5 - T_RANKINE_OFFSET,
        "Kelvin to Fahrenheit",
    ),
}


# --- Length ---


def _linear_pair(
    base: str, other: str, factor: float, base_name: str, other_name: str
) -> dict[str, ConversionRecord]:
    """Build the forward/inverse records for ``1 other = factor base``."""
    return {
        base + other: ConversionRecord(lambda x: x / factor, f"{base_name} to {other_name}"),
        other + base: ConversionRecord(lambda x: x * factor, f"{other_name} to {base_name}"),
    }


LENGTH_CONVERSIONS: dict[str, ConversionRecord] = {
    **_linear_pair("m", "ft", FOOT_TO_M, "meter", "foot"),
    **_linear_pair("m", "in", INCH_TO_M, "meter", "inch"),
    **_linear_pair("m", "mi", MILE_TO_M, "meter", "mile"),
    **_linear_pair("km", "mi", MILE_TO_KM, "kilometer", "mile"),
    **_linear_pair("m", "yd", YARD_TO_M, "meter", "yard"),
    **_linear_pair("m", "nmi", NAUTICAL_MILE_TO_M, "meter", "nautical mile"),
    **_linear_pair("km", "nmi", NAUTICAL_MILE_TO_KM, "kilometer", "nautical mile"),
}


@lru_cache(maxsize=1)
def default_table() -> ConversionTable:
    """Return the shared table of built-in conversions."""
    table = ConversionTable({"Temp": TEMP_CONVERSIONS, "Length": LENGTH_CONVERSIONS})
    logger.debug("Built default conversion table: %r", table)
    return table
