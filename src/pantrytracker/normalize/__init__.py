"""Normalize user-entered quantities into comparable base units."""

from pantrytracker.normalize.units import (
    Axis,
    NormalizedQuantity,
    can_aggregate,
    identify_axis,
    normalize_quantity,
    parse_amount,
)

__all__ = [
    "Axis",
    "NormalizedQuantity",
    "can_aggregate",
    "identify_axis",
    "normalize_quantity",
    "parse_amount",
]
