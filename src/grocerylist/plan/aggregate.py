"""Merging duplicate ingredients across the recipes of a meal plan."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from grocerylist.logging_config import get_logger
from grocerylist.normalize.categories import normalize_category
from grocerylist.normalize.quantity import parse_quantity
from grocerylist.normalize.units import NormalizedQuantity, canonicalize_unit
from grocerylist.schemas import IngredientRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class AggregationKey:
    """Identity of a shopping line: normalized name plus category."""

    name: str
    category: str


@dataclass
class ShoppingItemDraft:
    """A shopping list line that has not been persisted yet."""

    name: str
    quantity: float | None
    unit: str | None
    category: str
    recipe_names: list[str] = field(default_factory=list)

    @property
    def normalized_quantity(self) -> NormalizedQuantity:
        return NormalizedQuantity(value=self.quantity, unit=self.unit)

    def add_recipe(self, recipe_name: str | None) -> None:
        if recipe_name and recipe_name not in self.recipe_names:
            self.recipe_names.append(recipe_name)


def normalize_name(name: str | None) -> str:
    """Lowercase and trim an ingredient name for matching."""
    return (name or "").strip().lower()


def aggregation_key(ingredient: IngredientRecord) -> AggregationKey:
    """Derive the merge identity for an ingredient. Never fails."""
    return AggregationKey(
        name=normalize_name(ingredient.name),
        category=normalize_category(ingredient.category),
    )


def draft_from_ingredient(ingredient: IngredientRecord, category: str) -> ShoppingItemDraft:
    """Build a first draft for an ingredient already filed under a category."""
    normalized = canonicalize_unit(parse_quantity(ingredient.quantity), ingredient.unit)
    draft = ShoppingItemDraft(
        name=(ingredient.name or "").strip(),
        quantity=normalized.value,
        unit=normalized.unit,
        category=category,
    )
    draft.add_recipe(ingredient.recipe_name)
    return draft


def aggregate_ingredients(
    ingredients: Iterable[IngredientRecord],
) -> dict[AggregationKey, ShoppingItemDraft]:
    """
    Aggregate ingredients into one draft per (name, category).

    Quantities are summed only when both lines carry a quantity and a unit and
    the units agree. Otherwise the first line wins and the later quantity is
    dropped; the later line never becomes a second entry.

    Args:
        ingredients: Ingredient records from every recipe in the plan.

    Returns:
        Dict mapping aggregation keys to drafts.
    """
    aggregated: dict[AggregationKey, ShoppingItemDraft] = {}

    for ingredient in ingredients:
        key = aggregation_key(ingredient)
        incoming = draft_from_ingredient(ingredient, key.category)

        existing = aggregated.get(key)
        if existing is None:
            aggregated[key] = incoming
            continue

        if existing.normalized_quantity.same_unit(incoming.normalized_quantity):
            existing.quantity += incoming.quantity
        elif incoming.quantity is not None or incoming.unit is not None:
            logger.debug(
                f"Not merging {incoming.quantity} {incoming.unit} into "
                f"{existing.quantity} {existing.unit} for {key.name!r}"
            )

        existing.add_recipe(ingredient.recipe_name)

    logger.debug(f"Aggregated ingredients into {len(aggregated)} lines")
    return aggregated
