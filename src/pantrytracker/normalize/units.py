"""Unit normalization and conversion utilities."""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pantrytracker.logging_config import get_logger

logger = get_logger(__name__)


class Axis(str, Enum):
    """Measurement dimension of a normalized quantity."""

    MASS = "mass"
    VOLUME = "volume"
    COUNT = "count"


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Mass conversions (base unit: g)
MASS_UNITS: dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "lb": 453.59,
    "oz": 28.35,
}

# Volume conversions (base unit: ml)
VOLUME_UNITS: dict[str, float] = {
    "ml": 1.0,
    "l": 1000.0,
    "cup": 236.58,
    "tbsp": 15.0,
    "tsp": 5.0,
}

BASE_UNITS: dict[Axis, str] = {
    Axis.MASS: "g",
    Axis.VOLUME: "ml",
    Axis.COUNT: "pcs",
}

# Leading decimal number, e.g. "2", "1.5", ".5", "-3", "1e3"
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class NormalizedQuantity:
    """A quantity expressed in the base unit of its axis."""

    value: float
    axis: Axis

    @property
    def unit(self) -> str:
        """Base unit name for the axis."""
        return BASE_UNITS[self.axis]

    def same_axis(self, other: "NormalizedQuantity") -> bool:
        return self.axis == other.axis

    def __add__(self, other: "NormalizedQuantity") -> "NormalizedQuantity":
        """Add two normalized quantities if they share an axis."""
        if not self.same_axis(other):
            # Cross-axis stock never counts, keep the left side
            return self
        return NormalizedQuantity(value=self.value + other.value, axis=self.axis)


# =============================================================================
# Parsing Functions
# =============================================================================


def parse_amount(amount: Any) -> float:
    """
    Parse a user-entered amount into a float.

    Parsing is permissive: the leading number of a string is used
    ("12abc" -> 12.0, " 2.5 " -> 2.5) and anything unparsable, missing,
    NaN or infinite becomes 0.0. Never raises.
    """
    if amount is None or isinstance(amount, bool):
        return 0.0

    if isinstance(amount, (int, float)):
        text = amount
    else:
        match = _LEADING_NUMBER.match(str(amount))
        if not match:
            logger.debug(f"Unparsable amount {amount!r}, using 0")
            return 0.0
        text = match.group(1)

    try:
        value = float(text)
    except (OverflowError, ValueError):
        logger.debug(f"Amount {amount!r} out of range, using 0")
        return 0.0

    if not math.isfinite(value):
        return 0.0
    return value


def identify_axis(unit: str | None) -> tuple[Axis, float]:
    """
    Identify the axis and conversion factor for a unit.

    Unknown units (including empty ones) fall back to the count axis
    with a factor of 1.

    Returns:
        Tuple of (axis, conversion_factor)
    """
    unit_lower = (unit or "").strip().lower()

    if unit_lower in MASS_UNITS:
        return Axis.MASS, MASS_UNITS[unit_lower]

    if unit_lower in VOLUME_UNITS:
        return Axis.VOLUME, VOLUME_UNITS[unit_lower]

    return Axis.COUNT, 1.0


def normalize_quantity(amount: Any, unit: str | None) -> NormalizedQuantity:
    """
    Normalize an amount and unit to the base unit of its axis.

    Args:
        amount: The amount (string or number, possibly malformed).
        unit: The unit string, matched case-insensitively.

    Returns:
        NormalizedQuantity in grams, milliliters or pieces.
    """
    axis, factor = identify_axis(unit)
    return NormalizedQuantity(value=parse_amount(amount) * factor, axis=axis)


def can_aggregate(unit1: str | None, unit2: str | None) -> bool:
    """Return True if both units are on the same axis."""
    return identify_axis(unit1)[0] == identify_axis(unit2)[0]
