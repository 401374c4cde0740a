"""Match recipe ingredients against a pantry snapshot.

Every call works on caller-owned snapshots and keeps no state, so the
functions here can be used from any number of threads at once.
"""

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from pantrytracker.availability.expiry import is_expired
from pantrytracker.availability.models import (
    BareIngredient,
    ResolvedRequirement,
    StockEntry,
    StructuredIngredient,
    resolve_requirement,
    to_stock_entry,
)
from pantrytracker.logging_config import get_logger
from pantrytracker.normalize.units import NormalizedQuantity, normalize_quantity

logger = get_logger(__name__)


def name_matches(stock_name: str, required_name: str) -> bool:
    """
    Case-insensitive substring match of a pantry name against a requirement.

    Deliberately loose: "Whole Milk" and "milk chocolate" both match "Milk".
    """
    return (required_name or "").lower() in (stock_name or "").lower()


def available_quantity(
    requirement: ResolvedRequirement,
    pantry: Iterable[StockEntry],
    *,
    today: date,
) -> NormalizedQuantity:
    """Total usable stock for a requirement, on the requirement's axis."""
    required = normalize_quantity(requirement.amount, requirement.unit)
    total = NormalizedQuantity(value=0.0, axis=required.axis)

    for entry in pantry:
        if not name_matches(entry.name, requirement.name):
            continue
        if is_expired(entry.expiry_date, today=today):
            logger.debug(f"Skipping expired stock {entry.name!r} ({entry.expiry_date})")
            continue

        stock = normalize_quantity(entry.amount, entry.unit)
        if not stock.same_axis(required):
            logger.debug(
                f"Skipping {entry.name!r}: {stock.axis.value} stock for "
                f"{required.axis.value} requirement {requirement.name!r}"
            )
            continue
        total = total + stock

    return total


def is_missing(
    requirement: ResolvedRequirement,
    pantry: Iterable[StockEntry],
    *,
    today: date,
) -> bool:
    """True if matching, unexpired stock on the same axis falls short."""
    required = normalize_quantity(requirement.amount, requirement.unit)
    have = available_quantity(requirement, pantry, today=today)
    missing = have.value < required.value
    logger.debug(
        f"{requirement.name!r}: have {have.value:g} {have.unit}, "
        f"need {required.value:g} {required.unit}" + (" (missing)" if missing else "")
    )
    return missing


def _detached(item: Any) -> Any:
    """Copy a mutable input item so results never alias caller data."""
    if isinstance(item, (str, BareIngredient, StructuredIngredient)):
        return item
    try:
        return copy.deepcopy(item)
    except (TypeError, copy.Error):
        # Extra fields holding handles or locks; name/amount/unit are plain values
        logger.debug(f"Cannot deep-copy ingredient {type(item).__name__}, copying shallowly")
        return dict(item) if isinstance(item, Mapping) else item


def find_missing(
    required_ingredients: Iterable[Any] | None,
    pantry_snapshot: Iterable[Any] | None,
    *,
    today: date | None = None,
) -> list[Any]:
    """
    Return the required ingredients the pantry cannot cover.

    Args:
        required_ingredients: Bare names, mappings with name/amount/unit,
            or BareIngredient/StructuredIngredient instances.
        pantry_snapshot: Mappings or StockEntry instances.
        today: Reference date for expiry checks (defaults to today).

    Returns:
        The missing ingredients in their input order and shape.
    """
    today = today or date.today()
    pantry = [to_stock_entry(raw) for raw in pantry_snapshot or ()]

    return [
        _detached(raw)
        for raw in required_ingredients or ()
        if is_missing(resolve_requirement(raw), pantry, today=today)
    ]


def can_make(
    required_ingredients: Iterable[Any] | None,
    pantry_snapshot: Iterable[Any] | None,
    *,
    today: date | None = None,
) -> bool:
    """True if nothing is missing for the recipe."""
    return not find_missing(required_ingredients, pantry_snapshot, today=today)


# =============================================================================
# Recipe badges
# =============================================================================


@dataclass
class RecipeAvailability:
    """Availability of one recipe against the current pantry."""

    recipe_name: str
    missing: list[Any] = field(default_factory=list)

    @property
    def can_make(self) -> bool:
        return not self.missing

    @property
    def missing_count(self) -> int:
        return len(self.missing)

    @property
    def status_label(self) -> str:
        """Badge text for a recipe card."""
        if self.can_make:
            return "Ready to Cook!"
        return f"Missing {self.missing_count} items"

    def is_missing(self, ingredient_name: str) -> bool:
        """Check whether an ingredient (by exact name) is among the missing ones."""
        return any(resolve_requirement(m).name == ingredient_name for m in self.missing)


def check_recipe(
    recipe: Any,
    pantry_snapshot: Iterable[Any] | None,
    *,
    today: date | None = None,
) -> RecipeAvailability:
    """Compute availability for a recipe mapping or object with name/ingredients."""
    if isinstance(recipe, Mapping):
        name, ingredients = recipe.get("name"), recipe.get("ingredients")
    else:
        name, ingredients = getattr(recipe, "name", None), getattr(recipe, "ingredients", None)

    return RecipeAvailability(
        recipe_name=name if isinstance(name, str) else "",
        missing=find_missing(ingredients, pantry_snapshot, today=today),
    )


def check_recipes(
    recipes: Iterable[Any] | None,
    pantry_snapshot: Iterable[Any] | None,
    *,
    today: date | None = None,
) -> list[RecipeAvailability]:
    """Compute availability for every recipe against one pantry snapshot."""
    today = today or date.today()
    pantry = [to_stock_entry(raw) for raw in pantry_snapshot or ()]
    return [check_recipe(recipe, pantry, today=today) for recipe in recipes or ()]
