"""Normalize free-text ingredient fields into canonical forms."""

from grocerylist.normalize.categories import (
    all_categories,
    is_valid_category,
    normalize_category,
)
from grocerylist.normalize.quantity import QUANTITY_RULES, parse_quantity
from grocerylist.normalize.units import (
    NormalizedQuantity,
    canonical_unit,
    canonicalize_unit,
    is_cooking_unit,
)

__all__ = [
    "NormalizedQuantity",
    "QUANTITY_RULES",
    "all_categories",
    "canonical_unit",
    "canonicalize_unit",
    "is_cooking_unit",
    "is_valid_category",
    "normalize_category",
    "parse_quantity",
]
