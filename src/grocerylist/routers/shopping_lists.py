"""API routes for shopping list generation."""

from fastapi import APIRouter, HTTPException, status

from grocerylist.exceptions import GroceryListError
from grocerylist.logging_config import get_logger
from grocerylist.normalize.categories import all_categories
from grocerylist.plan.aggregate import ShoppingItemDraft
from grocerylist.plan.shopping_list import (
    ALL_IN_PANTRY_MESSAGE,
    build_shopping_list,
    require_ingredients,
)
from grocerylist.schemas import (
    GenerateShoppingListRequest,
    GenerateShoppingListResponse,
    ShoppingItemSchema,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


def _to_schema(item: ShoppingItemDraft) -> ShoppingItemSchema:
    return ShoppingItemSchema(
        name=item.name,
        quantity=item.quantity,
        unit=item.unit,
        category=item.category,
        recipe_names=list(item.recipe_names),
    )


@router.post("/generate", response_model=GenerateShoppingListResponse)
async def generate_shopping_list(
    request: GenerateShoppingListRequest,
) -> GenerateShoppingListResponse:
    """
    Build a shopping list from meal plan ingredients minus pantry stock.

    Nothing is persisted; the caller stores the returned items.
    """
    logger.info(
        f"Generating shopping list: {len(request.ingredients)} ingredients, "
        f"{len(request.pantry)} pantry items"
    )

    try:
        ingredients = require_ingredients(request.ingredients)
    except GroceryListError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    result = build_shopping_list(
        ingredients,
        request.pantry,
        name=request.name,
        week_start=request.week_start,
    )

    if result.all_in_pantry:
        return GenerateShoppingListResponse(
            message=ALL_IN_PANTRY_MESSAGE,
            all_in_pantry=True,
        )

    return GenerateShoppingListResponse(
        name=result.name,
        items=[_to_schema(item) for item in result.items],
        items_by_category={
            category: [_to_schema(item) for item in items]
            for category, items in result.items_by_category.items()
        },
    )


@router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    """List the canonical ingredient categories."""
    return all_categories()
