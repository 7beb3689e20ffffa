"""Shopping list generation from meal plans."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol

from grocerylist.config import get_settings
from grocerylist.exceptions import NoIngredientsError
from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.plan.aggregate import ShoppingItemDraft, aggregate_ingredients
from grocerylist.plan.pantry import subtract_pantry
from grocerylist.schemas import IngredientRecord, PantryRecord

logger = get_logger(__name__)

ALL_IN_PANTRY_MESSAGE = "All ingredients are already in your pantry"


@dataclass
class ShoppingListResult:
    """Outcome of building a shopping list: drafts to persist, or nothing to buy."""

    name: str
    items: list[ShoppingItemDraft] = field(default_factory=list)

    @property
    def all_in_pantry(self) -> bool:
        """True when the pantry already covers every ingredient."""
        return not self.items

    @property
    def items_by_category(self) -> dict[str, list[ShoppingItemDraft]]:
        """Group items by category, keeping list order within each group."""
        grouped: dict[str, list[ShoppingItemDraft]] = {}
        for item in self.items:
            grouped.setdefault(item.category, []).append(item)
        return grouped


@dataclass
class GeneratedShoppingList:
    """Result of generating and persisting a list for a stored meal plan."""

    meal_plan_id: str
    result: ShoppingListResult
    list_id: str | None = None

    @property
    def message(self) -> str | None:
        return ALL_IN_PANTRY_MESSAGE if self.result.all_in_pantry else None


def monday_of(day: date) -> date:
    """Return the Monday of the week containing the given date."""
    return day - timedelta(days=day.weekday())


def default_list_name(week_start: date | None = None) -> str:
    """Build the fallback list name, e.g. "Meal Plan — Week of Jan 2"."""
    monday = monday_of(week_start or date.today())
    week = f"{monday:%b} {monday.day}"
    return get_settings().list_name_template.format(week=week)


def require_ingredients(
    ingredients: list[IngredientRecord], meal_plan_id: str | None = None
) -> list[IngredientRecord]:
    """Return the ingredients, raising NoIngredientsError when there are none."""
    if not ingredients:
        raise NoIngredientsError(meal_plan_id)
    return ingredients


def build_shopping_list(
    ingredients: Iterable[IngredientRecord],
    pantry: Iterable[PantryRecord],
    name: str | None = None,
    week_start: date | None = None,
) -> ShoppingListResult:
    """
    Build a shopping list from meal plan ingredients and the user's pantry.

    Ingredients are aggregated across recipes, then reduced by pantry stock.
    Items come back sorted by category and name.

    Args:
        ingredients: Ingredient records from every recipe in the plan.
        pantry: The user's pantry records.
        name: List name. Blank names fall back to the weekly default.
        week_start: Any date in the planned week, used for the default name.

    Returns:
        ShoppingListResult; ``all_in_pantry`` is set when nothing is left to buy.
    """
    aggregated = aggregate_ingredients(ingredients)
    remaining = subtract_pantry(aggregated, pantry)

    list_name = name.strip() if name and name.strip() else default_list_name(week_start)
    items = sorted(remaining.values(), key=lambda item: (item.category, item.name.lower()))

    if not items:
        logger.info(f"{ALL_IN_PANTRY_MESSAGE} ({len(aggregated)} lines covered)")
    else:
        logger.info(
            f"Built shopping list {list_name!r}: {len(items)} items from "
            f"{len(aggregated)} aggregated lines"
        )

    return ShoppingListResult(name=list_name, items=items)


# =============================================================================
# Collaborators
# =============================================================================


class MealPlanSource(Protocol):
    """Yields the flattened ingredients of every recipe in a meal plan."""

    async def get_plan_ingredients(self, meal_plan_id: str) -> list[IngredientRecord]: ...


class PantrySource(Protocol):
    """Yields every pantry record a user owns."""

    async def list_pantry(self, user_id: str) -> list[PantryRecord]: ...


class ShoppingListSink(Protocol):
    """Persists a new shopping list and returns its identifier."""

    async def create_list(
        self,
        user_id: str,
        name: str,
        items: list[ShoppingItemDraft],
    ) -> str: ...


class ShoppingListService:
    """
    Generates shopping lists for stored meal plans.

    Reads a consistent snapshot from the meal plan and pantry sources, runs the
    pure list builder and hands non-empty results to the sink.
    """

    def __init__(
        self,
        meal_plans: MealPlanSource,
        pantry: PantrySource,
        sink: ShoppingListSink,
    ):
        self.meal_plans = meal_plans
        self.pantry = pantry
        self.sink = sink

    async def generate_for_meal_plan(
        self,
        user_id: str,
        meal_plan_id: str,
        name: str | None = None,
        week_start: date | None = None,
    ) -> GeneratedShoppingList:
        """
        Generate and persist a shopping list for a meal plan.

        Raises:
            NoIngredientsError: The plan's recipes have no ingredients.
        """
        with LoggingContext(user_id=user_id, meal_plan_id=meal_plan_id):
            logger.info(f"Generating shopping list for plan {meal_plan_id}")

            ingredients = require_ingredients(
                await self.meal_plans.get_plan_ingredients(meal_plan_id), meal_plan_id
            )

            pantry_items = await self.pantry.list_pantry(user_id)

            result = build_shopping_list(ingredients, pantry_items, name=name, week_start=week_start)
            if result.all_in_pantry:
                return GeneratedShoppingList(meal_plan_id=meal_plan_id, result=result)

            list_id = await self.sink.create_list(user_id, result.name, result.items)
            logger.info(f"Created shopping list {list_id} with {len(result.items)} items")

            return GeneratedShoppingList(meal_plan_id=meal_plan_id, result=result, list_id=list_id)
