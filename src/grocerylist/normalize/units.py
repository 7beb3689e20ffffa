"""Unit canonicalization for shopping lines."""

from dataclasses import dataclass

from grocerylist.config import get_settings
from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Synonym Tables
# =============================================================================

# Spelling -> canonical spelling. Canonical spellings map to themselves.
UNIT_SYNONYMS: dict[str, str] = {
    # Volume, metric
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "cl": "cl",
    "centiliter": "cl",
    "centiliters": "cl",
    "dl": "dl",
    "deciliter": "dl",
    "deciliters": "dl",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    # Volume, US customary
    "tsp": "tsp",
    "tsps": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cup",
    "fl oz": "fl oz",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    # Weight
    "mg": "mg",
    "milligram": "mg",
    "milligrams": "mg",
    "g": "g",
    "gr": "g",
    "gram": "g",
    "grams": "g",
    "gramme": "g",
    "grammes": "g",
    "kg": "kg",
    "kgs": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    # Count and packaging
    "piece": "piece",
    "pieces": "piece",
    "pc": "piece",
    "pcs": "piece",
    "slice": "slice",
    "slices": "slice",
    "clove": "clove",
    "cloves": "clove",
    "sprig": "sprig",
    "sprigs": "sprig",
    "stalk": "stalk",
    "stalks": "stalk",
    "leaf": "leaf",
    "leaves": "leaf",
    "bunch": "bunch",
    "bunches": "bunch",
    "head": "head",
    "heads": "head",
    "can": "can",
    "cans": "can",
    "tin": "can",
    "tins": "can",
    "jar": "jar",
    "jars": "jar",
    "bottle": "bottle",
    "bottles": "bottle",
    "package": "package",
    "packages": "package",
    "pkg": "package",
    "pack": "package",
    "packs": "package",
    "bag": "bag",
    "bags": "bag",
    "box": "box",
    "boxes": "box",
    "stick": "stick",
    "sticks": "stick",
    # Imprecise amounts
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    "splash": "splash",
    "handful": "handful",
    "handfuls": "handful",
    "drop": "drop",
    "drops": "drop",
}

# Recipe-scale units nobody buys by; stripped when strip_cooking_units is set
COOKING_UNITS: frozenset[str] = frozenset(
    {
        "tsp",
        "tbsp",
        "cup",
        "fl oz",
        "pinch",
        "dash",
        "splash",
        "handful",
        "drop",
        "clove",
        "slice",
        "sprig",
        "stalk",
        "leaf",
        "piece",
    }
)


@dataclass(frozen=True)
class NormalizedQuantity:
    """A parsed quantity paired with its canonical unit."""

    value: float | None
    unit: str | None

    @property
    def is_mergeable(self) -> bool:
        """Only lines with both a value and a unit can be summed."""
        return self.value is not None and self.unit is not None

    def same_unit(self, other: "NormalizedQuantity") -> bool:
        """Check whether both quantities are complete and share a unit."""
        return (
            self.is_mergeable
            and other.is_mergeable
            and self.unit.lower() == other.unit.lower()
        )


def canonical_unit(unit: str | None) -> str | None:
    """
    Resolve a unit spelling to its canonical form.

    Unknown units keep their original spelling, trimmed. Blank units are None.
    """
    if unit is None:
        return None

    stripped = " ".join(unit.split())
    if not stripped:
        return None

    key = stripped.lower().rstrip(".")
    return UNIT_SYNONYMS.get(key, stripped)


def is_cooking_unit(unit: str | None) -> bool:
    """Check whether a unit is a recipe-scale measurement."""
    resolved = canonical_unit(unit)
    return resolved is not None and resolved.lower() in COOKING_UNITS


def canonicalize_unit(
    quantity: float | None,
    unit: str | None,
    strip_cooking_units: bool | None = None,
) -> NormalizedQuantity:
    """
    Canonicalize a parsed quantity and raw unit for a shopping line.

    A value without a unit, or a unit without a value, is kept as given but
    will never be summed with another line.

    Args:
        quantity: The quantity, already parsed to a number.
        unit: The raw unit string.
        strip_cooking_units: Drop recipe-scale units entirely. Defaults to the
            ``strip_cooking_units`` setting.
    """
    if strip_cooking_units is None:
        strip_cooking_units = get_settings().strip_cooking_units

    resolved = canonical_unit(unit)

    if strip_cooking_units and resolved is not None and resolved.lower() in COOKING_UNITS:
        logger.debug(f"Stripping cooking unit {unit!r} from shopping line")
        return NormalizedQuantity(value=None, unit=None)

    return NormalizedQuantity(value=quantity, unit=resolved)
