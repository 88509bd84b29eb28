"""Consistency checks for conversion tables."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from husky.core.conversions import ConversionRecord, ConversionTable
from husky.utils.units import reference_convert, split_key

ROUND_TRIP_VALUES = (0.0, 1.0, 100.0, -50.0, 3.14159)
REFERENCE_PROBE = 100.0
REL_TOL = 1e-9
ABS_TOL = 1e-9


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=REL_TOL, abs_tol=ABS_TOL)


def inverse_key(key: str, units: Mapping[str, ConversionRecord]) -> str | None:
    """Find the pair key converting back from *key*'s destination to its source."""
    for i in range(1, len(key)):
        candidate = key[i:] + key[:i]
        if candidate != key and candidate in units:
            return candidate
    return None


def validate_record(name: str, record: ConversionRecord, result: ValidationResult) -> None:
    """Check that a record is callable and described."""
    if not callable(record.converter):
        result.error(name, f"{name}: converter is not callable")
    if not record.description.strip():
        result.error(name, f"{name}: missing description")


def validate_round_trip(
    category: str, units: Mapping[str, ConversionRecord], result: ValidationResult
) -> None:
    """Forward then inverse conversion must return the input value."""
    for key, record in units.items():
        name = f"{category}.{key}"
        back = inverse_key(key, units)
        if back is None:
            result.info(name, f"{name} has no inverse conversion")
            continue
        for value in ROUND_TRIP_VALUES:
            recovered = units[back](record(value))
            if not _close(recovered, value):
                result.error(
                    name,
                    f"{name} → {back} round trip of {value} gave {recovered}",
                    value=recovered,
                    limit=value,
                )


def validate_against_reference(
    category: str, units: Mapping[str, ConversionRecord], result: ValidationResult
) -> None:
    """Compare converters with pint for every key made of known symbols."""
    for key, record in units.items():
        name = f"{category}.{key}"
        symbols = split_key(key)
        if symbols is None:
            result.info(name, f"{name} has no reference definition")
            continue
        expected = reference_convert(REFERENCE_PROBE, *symbols)
        actual = record(REFERENCE_PROBE)
        if not _close(actual, expected):
            result.error(
                name,
                f"{name}: {REFERENCE_PROBE} gives {actual}, reference gives {expected}",
                value=actual,
                limit=expected,
            )


def validate_table(table: ConversionTable, reference: bool = True) -> ValidationResult:
    """Run all consistency checks on a conversion table.

    Args:
        table: Table to check.
        reference: Also cross-check against pint.
    """
    result = ValidationResult()
    owners: dict[str, list[str]] = defaultdict(list)

    for category, units in table.items():
        if not units:
            result.warning(category, f"Category {category} has no conversions")
        for key, record in units.items():
            owners[key].append(category)
            validate_record(f"{category}.{key}", record, result)
        validate_round_trip(category, units, result)
        if reference:
            validate_against_reference(category, units, result)

    for key, categories in owners.items():
        if len(categories) > 1:
            result.warning(
                key,
                f"Pair key {key} is defined in {', '.join(categories)}; "
                "lookups without a unit type are ambiguous",
            )

    return result
