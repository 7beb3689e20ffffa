"""Subtracting pantry stock from aggregated shopping lines."""

from collections.abc import Iterable
from dataclasses import replace

from grocerylist.logging_config import get_logger
from grocerylist.normalize.units import NormalizedQuantity, canonical_unit
from grocerylist.plan.aggregate import AggregationKey, ShoppingItemDraft, normalize_name
from grocerylist.schemas import PantryRecord

logger = get_logger(__name__)


def build_pantry_lookup(pantry: Iterable[PantryRecord]) -> dict[str, PantryRecord]:
    """Index pantry records by normalized name. Later records win."""
    return {normalize_name(item.name): item for item in pantry}


def subtract_pantry(
    drafts: dict[AggregationKey, ShoppingItemDraft],
    pantry: Iterable[PantryRecord],
) -> dict[AggregationKey, ShoppingItemDraft]:
    """
    Reduce drafts by what the user already owns.

    Pantry items match on name only. A pantry item without a quantity counts
    as enough. Unit mismatches leave the draft untouched.

    Returns:
        A new dict holding the drafts that still need to be bought.
    """
    lookup = build_pantry_lookup(pantry)
    remaining: dict[AggregationKey, ShoppingItemDraft] = {}

    for key, draft in drafts.items():
        pantry_item = lookup.get(key.name)
        if pantry_item is None:
            remaining[key] = draft
            continue

        if pantry_item.quantity is None:
            logger.debug(f"Pantry has {key.name!r} without a quantity, dropping")
            continue

        stock = NormalizedQuantity(value=pantry_item.quantity, unit=canonical_unit(pantry_item.unit))
        if not draft.normalized_quantity.same_unit(stock):
            remaining[key] = draft
            continue

        left = draft.quantity - stock.value
        if left <= 0:
            logger.debug(f"Pantry covers {key.name!r}, dropping")
            continue

        remaining[key] = replace(draft, quantity=left, recipe_names=list(draft.recipe_names))

    logger.debug(f"{len(remaining)} of {len(drafts)} lines left after pantry subtraction")
    return remaining
