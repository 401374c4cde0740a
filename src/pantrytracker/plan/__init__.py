"""Shopping list helpers."""

from pantrytracker.plan.shopping_list import (
    build_grocery_items,
    grocery_item_to_stock_entry,
    sort_grocery_items,
)

__all__ = [
    "build_grocery_items",
    "grocery_item_to_stock_entry",
    "sort_grocery_items",
]
