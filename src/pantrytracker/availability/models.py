"""Plain data types consumed by the availability engine.

Snapshots arrive from the pantry and recipe collections as loosely shaped
records (mappings with camelCase keys, bare ingredient strings, numbers
stored as strings). Everything is converted exactly once, here, into the
frozen dataclasses below before any matching happens.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Union

DEFAULT_AMOUNT = "1"
DEFAULT_UNIT = "pcs"


@dataclass(frozen=True)
class StockEntry:
    """One pantry record."""

    name: str
    amount: str | float = ""
    unit: str = ""
    expiry_date: str | date = ""  # YYYY-MM-DD, empty means no expiry
    category: str = "Other"
    notes: str = ""


@dataclass(frozen=True)
class BareIngredient:
    """Recipe ingredient given by name only (one piece)."""

    name: str


@dataclass(frozen=True)
class StructuredIngredient:
    """Recipe ingredient with an explicit amount and unit."""

    name: str
    amount: str | float = DEFAULT_AMOUNT
    unit: str = DEFAULT_UNIT


RequiredIngredient = Union[BareIngredient, StructuredIngredient]


@dataclass(frozen=True)
class ResolvedRequirement:
    """Uniform view of a required ingredient used by the matcher."""

    name: str
    amount: str | float
    unit: str


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ("" if value is None else str(value))


def _field(raw: Any, *keys: str) -> Any:
    """Read the first present key from a mapping or attribute from an object."""
    for key in keys:
        if isinstance(raw, Mapping):
            if raw.get(key) is not None:
                return raw[key]
        elif getattr(raw, key, None) is not None:
            return getattr(raw, key)
    return None


def to_required_ingredient(raw: Any) -> RequiredIngredient:
    """Tag a raw recipe ingredient as bare or structured."""
    if isinstance(raw, (BareIngredient, StructuredIngredient)):
        return raw
    if isinstance(raw, str):
        return BareIngredient(name=raw)

    amount = _field(raw, "amount")
    unit = _field(raw, "unit")
    return StructuredIngredient(
        name=_text(_field(raw, "name")),
        amount=DEFAULT_AMOUNT if amount is None else amount,
        unit=DEFAULT_UNIT if unit is None else _text(unit),
    )


def resolve_requirement(raw: Any) -> ResolvedRequirement:
    """Resolve any accepted ingredient shape into name, amount and unit."""
    ingredient = to_required_ingredient(raw)
    if isinstance(ingredient, BareIngredient):
        return ResolvedRequirement(name=ingredient.name, amount=DEFAULT_AMOUNT, unit=DEFAULT_UNIT)
    return ResolvedRequirement(
        name=ingredient.name,
        amount=ingredient.amount,
        unit=ingredient.unit,
    )


def to_stock_entry(raw: Any) -> StockEntry:
    """Convert a raw pantry record into a StockEntry; missing fields become empty."""
    if isinstance(raw, StockEntry):
        return raw

    amount = _field(raw, "amount")
    return StockEntry(
        name=_text(_field(raw, "name")),
        amount="" if amount is None else amount,
        unit=_text(_field(raw, "unit")),
        expiry_date=_field(raw, "expiry_date", "expiryDate") or "",
        category=_text(_field(raw, "category")) or "Other",
        notes=_text(_field(raw, "notes")),
    )
