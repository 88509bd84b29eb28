"""Utility modules for husky."""

from husky.utils.constants import FOOT_TO_M, MILE_TO_M, T_CELSIUS_OFFSET
from husky.utils.units import get_unit_registry, reference_convert

__all__ = ["FOOT_TO_M", "MILE_TO_M", "T_CELSIUS_OFFSET", "get_unit_registry", "reference_convert"]
