"""Common data schemas shared with the persistence layer."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

GroceryCategory = Literal["Produce", "Dairy", "Meat", "Grain", "Snack", "Other"]

GROCERY_CATEGORIES: tuple[str, ...] = ("Produce", "Dairy", "Meat", "Grain", "Snack", "Other")


class GroceryItem(BaseModel):
    """A shopping-list record waiting to be bought."""

    name: str = Field(..., min_length=1)
    amount: str = "1"
    unit: str = "pcs"
    category: GroceryCategory = "Other"
    completed: bool = Field(False, description="Already acquired")
    notes: str = ""

    @field_validator("amount", "unit", "notes", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Store numbers as entered text; None becomes empty."""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> str:
        """Fall back to 'Other' for unknown categories."""
        return v if v in GROCERY_CATEGORIES else "Other"
