"""Shopping list records built from missing recipe ingredients."""

from collections.abc import Iterable
from datetime import date
from typing import Any

from pantrytracker.availability.models import StockEntry, resolve_requirement
from pantrytracker.config import Settings, get_settings
from pantrytracker.logging_config import get_logger
from pantrytracker.schemas import GroceryItem

logger = get_logger(__name__)

# Name used for recipe ingredients entered without one
UNNAMED_ITEM = "Unnamed item"


def build_grocery_items(
    missing: Iterable[Any],
    *,
    category: str | None = None,
    settings: Settings | None = None,
) -> list[GroceryItem]:
    """
    Turn missing ingredients into grocery records ready to persist.

    Each record keeps the ingredient's own name, amount and unit, starts
    as not yet acquired and gets the default category unless one is given.

    Args:
        missing: Output of find_missing (any accepted ingredient shape).
        category: Category for every new record.
        settings: Settings override, mainly for tests.

    Returns:
        One GroceryItem per missing ingredient, in the same order.
    """
    settings = settings or get_settings()
    category = category or settings.default_grocery_category

    items = []
    for raw in missing:
        requirement = resolve_requirement(raw)
        items.append(
            GroceryItem(
                name=requirement.name.strip() or UNNAMED_ITEM,
                amount=requirement.amount,
                unit=requirement.unit,
                category=category,
                completed=False,
            )
        )

    logger.info(f"Prepared {len(items)} grocery items")
    return items


def sort_grocery_items(items: Iterable[GroceryItem]) -> list[GroceryItem]:
    """Pending items first, keeping the existing order within each group."""
    return sorted(items, key=lambda item: item.completed)


def grocery_item_to_stock_entry(item: GroceryItem, *, today: date | None = None) -> StockEntry:
    """
    Convert a bought grocery item into a pantry stock entry.

    The new entry is dated today; the household corrects the real expiry
    date when editing the pantry item.
    """
    today = today or date.today()
    return StockEntry(
        name=item.name,
        amount=item.amount,
        unit=item.unit,
        expiry_date=today.isoformat(),
        category=item.category,
        notes=item.notes,
    )
