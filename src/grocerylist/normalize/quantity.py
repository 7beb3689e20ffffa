"""Free-text quantity parsing."""

import math
import re
from collections.abc import Callable

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Patterns
# =============================================================================

PLAIN_DECIMAL = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")
SIMPLE_FRACTION = re.compile(r"^(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)$")

# Unicode vulgar fractions rewritten to their a/b spelling before parsing
VULGAR_FRACTIONS: dict[str, str] = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}


def _expand_vulgar_fractions(text: str) -> str:
    """Rewrite "1½" as "1 1/2" and "½" as "1/2"."""
    for glyph, spelled in VULGAR_FRACTIONS.items():
        text = re.sub(rf"(\d)\s*{glyph}", rf"\1 {spelled}", text)
        text = text.replace(glyph, spelled)
    return text


def _finite(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _parse_decimal(token: str) -> float | None:
    if PLAIN_DECIMAL.match(token):
        return _finite(float(token))
    return None


def _parse_fraction(token: str) -> float | None:
    match = SIMPLE_FRACTION.match(token)
    if not match:
        return None
    numerator = _finite(float(match.group(1)))
    denominator = _finite(float(match.group(2)))
    if numerator is None or denominator is None or denominator == 0:
        return None
    return _finite(numerator / denominator)


# =============================================================================
# Parse Rules
# =============================================================================


def parse_leading_decimal(text: str) -> float | None:
    """
    Parse "2", "1.5" and mixed fractions like "1 1/2".

    The first token must be a plain decimal. A single trailing "a/b" token is
    added to it; a zero denominator leaves the whole number alone.
    """
    parts = text.split()
    if len(parts) not in (1, 2):
        return None

    value = _parse_decimal(parts[0])
    if value is None:
        return None

    if len(parts) == 2:
        if not SIMPLE_FRACTION.match(parts[1]):
            return None
        remainder = _parse_fraction(parts[1])
        if remainder is not None:
            value += remainder

    return _finite(value)


def parse_simple_fraction(text: str) -> float | None:
    """Parse "1/2" style fractions."""
    return _parse_fraction(text)


def parse_range_minimum(text: str) -> float | None:
    """Parse ranges like "2-3", keeping the lower bound."""
    if "-" not in text:
        return None
    return _parse_decimal(text.split("-")[0].strip())


# First matching rule wins. "1 1/2" must reach the decimal rule before the
# fraction rule, otherwise the whole number would be lost.
QUANTITY_RULES: tuple[tuple[str, Callable[[str], float | None]], ...] = (
    ("decimal", parse_leading_decimal),
    ("fraction", parse_simple_fraction),
    ("range", parse_range_minimum),
)


def parse_quantity(text: str | None) -> float | None:
    """
    Parse a free-text quantity into a number.

    Handles formats like:
    - "2", "1.5"
    - "1/2"
    - "1 1/2" and "1½" (mixed fractions)
    - "2-3" (range, returns the lower bound)

    Returns None when the text is empty or cannot be interpreted.
    """
    if text is None:
        return None

    text = text.strip()
    if not text:
        return None

    text = _expand_vulgar_fractions(text)

    for rule_name, rule in QUANTITY_RULES:
        value = rule(text)
        if value is not None:
            logger.debug(f"Parsed quantity {text!r} as {value} via {rule_name} rule")
            return value

    logger.debug(f"Could not parse quantity {text!r}")
    return None
