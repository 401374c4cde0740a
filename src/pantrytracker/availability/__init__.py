"""Ingredient availability: expiry checks and recipe-to-pantry matching."""

from pantrytracker.availability.expiry import (
    ExpiryStatus,
    days_until_expiry,
    expiry_status,
    is_expired,
    parse_expiry_date,
)
from pantrytracker.availability.matcher import (
    RecipeAvailability,
    can_make,
    check_recipe,
    check_recipes,
    find_missing,
    name_matches,
)
from pantrytracker.availability.models import (
    BareIngredient,
    RequiredIngredient,
    ResolvedRequirement,
    StockEntry,
    StructuredIngredient,
    resolve_requirement,
    to_required_ingredient,
    to_stock_entry,
)

__all__ = [
    "BareIngredient",
    "ExpiryStatus",
    "RecipeAvailability",
    "RequiredIngredient",
    "ResolvedRequirement",
    "StockEntry",
    "StructuredIngredient",
    "can_make",
    "check_recipe",
    "check_recipes",
    "days_until_expiry",
    "expiry_status",
    "find_missing",
    "is_expired",
    "name_matches",
    "parse_expiry_date",
    "resolve_requirement",
    "to_required_ingredient",
    "to_stock_entry",
]
