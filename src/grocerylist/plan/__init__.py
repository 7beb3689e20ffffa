"""Shopping list planning: aggregation, pantry subtraction and list building."""

from grocerylist.plan.aggregate import (
    AggregationKey,
    ShoppingItemDraft,
    aggregate_ingredients,
    aggregation_key,
)
from grocerylist.plan.pantry import subtract_pantry
from grocerylist.plan.shopping_list import (
    GeneratedShoppingList,
    ShoppingListResult,
    ShoppingListService,
    build_shopping_list,
    default_list_name,
    monday_of,
    require_ingredients,
)

__all__ = [
    "AggregationKey",
    "GeneratedShoppingList",
    "ShoppingItemDraft",
    "ShoppingListResult",
    "ShoppingListService",
    "aggregate_ingredients",
    "aggregation_key",
    "build_shopping_list",
    "default_list_name",
    "monday_of",
    "require_ingredients",
    "subtract_pantry",
]
