"""Common data schemas for shopping list generation."""

from datetime import date

from pydantic import BaseModel, Field

MAX_QUANTITY = 99999.999


class IngredientRecord(BaseModel):
    """One ingredient line from a recipe scheduled in a meal plan."""

    name: str
    quantity: str | None = Field(None, description="Free-text quantity, e.g. '1 1/2' or '2-3'")
    unit: str | None = None
    category: str | None = None
    recipe_name: str | None = None


class PantryRecord(BaseModel):
    """One item the user already has at home."""

    name: str
    quantity: float | None = Field(None, ge=0, le=MAX_QUANTITY)
    unit: str | None = Field(None, max_length=50)
    category: str | None = None


class GenerateShoppingListRequest(BaseModel):
    """Request to build a shopping list from meal plan ingredients."""

    ingredients: list[IngredientRecord] = Field(default_factory=list)
    pantry: list[PantryRecord] = Field(default_factory=list)
    name: str | None = Field(None, max_length=255, description="List name, localized by the client")
    week_start: date | None = Field(None, description="Any date in the planned week")


class ShoppingItemSchema(BaseModel):
    """Single line of a generated shopping list."""

    name: str
    quantity: float | None = None
    unit: str | None = None
    category: str
    recipe_names: list[str] = Field(default_factory=list)


class GenerateShoppingListResponse(BaseModel):
    """Generated shopping list, or an empty result when the pantry covers everything."""

    name: str | None = None
    message: str | None = None
    list_id: str | None = None
    all_in_pantry: bool = False
    items: list[ShoppingItemSchema] = Field(default_factory=list)
    items_by_category: dict[str, list[ShoppingItemSchema]] = Field(default_factory=dict)
