"""Household pantry tracker: ingredient availability engine."""

from pantrytracker.availability import (
    BareIngredient,
    StockEntry,
    StructuredIngredient,
    can_make,
    find_missing,
    is_expired,
)
from pantrytracker.normalize import Axis, NormalizedQuantity, normalize_quantity

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "BareIngredient",
    "NormalizedQuantity",
    "StockEntry",
    "StructuredIngredient",
    "can_make",
    "find_missing",
    "is_expired",
    "normalize_quantity",
]
