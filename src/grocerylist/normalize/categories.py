"""Ingredient category normalization."""

from grocerylist.config import get_settings
from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Category Tables
# =============================================================================

CANONICAL_CATEGORIES: frozenset[str] = frozenset(
    {
        "produce",
        "proteins",
        "dairy",
        "bakery",
        "pantry",
        "spices",
        "condiments",
        "beverages",
        "snacks",
        "frozen",
        "household",
        "other",
    }
)

# Common user-entered or AI-returned categories mapped onto the canonical set
CATEGORY_ALIASES: dict[str, str] = {
    # Pantry staples, grains and canned goods
    "pantry staples": "pantry",
    "pantry-staples": "pantry",
    "staples": "pantry",
    "dry goods": "pantry",
    "grains": "pantry",
    "grain": "pantry",
    "canned": "pantry",
    "canned goods": "pantry",
    "canned food": "pantry",
    "pasta": "pantry",
    "rice": "pantry",
    "cereal": "pantry",
    "cereals": "pantry",
    "noodles": "pantry",
    "oats": "pantry",
    "legumes": "pantry",
    "beans": "pantry",
    "lentils": "pantry",
    "dried beans": "pantry",
    # Bakery and baking
    "baking": "bakery",
    "baking supplies": "bakery",
    "baked goods": "bakery",
    "bread": "bakery",
    "flour": "bakery",
    "sugar": "bakery",
    "yeast": "bakery",
    # Proteins
    "meat": "proteins",
    "meats": "proteins",
    "meat & seafood": "proteins",
    "seafood": "proteins",
    "fish": "proteins",
    "poultry": "proteins",
    "chicken": "proteins",
    "beef": "proteins",
    "pork": "proteins",
    "lamb": "proteins",
    "protein": "proteins",
    "tofu": "proteins",
    "deli": "proteins",
    "deli meat": "proteins",
    # Produce
    "vegetables": "produce",
    "vegetable": "produce",
    "veggies": "produce",
    "fruits": "produce",
    "fruit": "produce",
    "fresh produce": "produce",
    "herbs": "produce",
    "fresh herbs": "produce",
    "greens": "produce",
    "leafy greens": "produce",
    "salad": "produce",
    # Dairy (eggs sit with dairy in most stores)
    "milk": "dairy",
    "cheese": "dairy",
    "yogurt": "dairy",
    "butter": "dairy",
    "cream": "dairy",
    "eggs": "dairy",
    "egg": "dairy",
    "dairy & eggs": "dairy",
    # Spices
    "spice": "spices",
    "seasoning": "spices",
    "seasonings": "spices",
    "herbs & spices": "spices",
    "salt": "spices",
    "pepper": "spices",
    # Condiments, oils and sauces
    "condiment": "condiments",
    "sauce": "condiments",
    "sauces": "condiments",
    "oil": "condiments",
    "oils": "condiments",
    "oils & vinegars": "condiments",
    "vinegar": "condiments",
    "dressing": "condiments",
    "dressings": "condiments",
    "spreads": "condiments",
    "honey": "condiments",
    "syrup": "condiments",
    # Beverages
    "beverage": "beverages",
    "drink": "beverages",
    "drinks": "beverages",
    "juice": "beverages",
    "coffee": "beverages",
    "tea": "beverages",
    "wine": "beverages",
    "beer": "beverages",
    "alcohol": "beverages",
    # Snacks
    "snack": "snacks",
    "chips": "snacks",
    "crackers": "snacks",
    "cookies": "snacks",
    "candy": "snacks",
    "nuts": "snacks",
    # Frozen
    "frozen food": "frozen",
    "frozen foods": "frozen",
    "frozen vegetables": "frozen",
    "ice cream": "frozen",
    # Household
    "cleaning": "household",
    "paper products": "household",
    "toiletries": "household",
    "personal care": "household",
    # Catch-alls
    "misc": "other",
    "miscellaneous": "other",
    "general": "other",
    "uncategorized": "other",
}


def normalize_category(category: str | None) -> str:
    """
    Map a free-text category onto the canonical category set.

    Matching is case-insensitive and ignores surrounding whitespace. Missing or
    unknown categories fall back to the configured default category.
    """
    default = get_settings().default_category
    if not category:
        return default

    normalized = category.strip().lower()
    if not normalized:
        return default

    if normalized in CANONICAL_CATEGORIES:
        return normalized

    if normalized in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[normalized]

    logger.warning(f"Unknown category {category!r} normalized to {default!r}")
    return default


def is_valid_category(category: str | None) -> bool:
    """Check whether a category is already canonical."""
    return bool(category) and category.strip().lower() in CANONICAL_CATEGORIES


def all_categories() -> list[str]:
    """Return the canonical categories in a stable order."""
    return sorted(CANONICAL_CATEGORIES)
