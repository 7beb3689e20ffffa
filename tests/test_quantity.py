"""Unit tests for free-text quantity parsing."""

import pytest

from grocerylist.normalize.quantity import (
    QUANTITY_RULES,
    parse_leading_decimal,
    parse_quantity,
    parse_range_minimum,
    parse_simple_fraction,
)


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_integer(self):
        """Test parsing simple integers."""
        assert parse_quantity("2") == 2.0
        assert parse_quantity("10") == 10.0

    def test_parse_decimal(self):
        """Test parsing decimal numbers."""
        assert parse_quantity("1.5") == 1.5
        assert parse_quantity("0.25") == 0.25
        assert parse_quantity(".5") == 0.5

    def test_parse_fraction(self):
        """Test parsing simple fractions."""
        assert parse_quantity("1/2") == 0.5
        assert parse_quantity("3/4") == 0.75

    def test_parse_mixed_fraction(self):
        """Test parsing mixed fractions like '1 1/2'."""
        assert parse_quantity("1 1/2") == 1.5
        assert parse_quantity("2 1/4") == 2.25

    def test_parse_range_keeps_lower_bound(self):
        """Test that ranges resolve to their minimum."""
        assert parse_quantity("2-3") == 2.0
        assert parse_quantity("1.5 - 2") == 1.5

    def test_surrounding_whitespace(self):
        """Test that input is trimmed before parsing."""
        assert parse_quantity("  3  ") == 3.0

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_is_none(self, text):
        """Test that empty input yields no value."""
        assert parse_quantity(text) is None

    @pytest.mark.parametrize("text", ["abc", "to taste", "a pinch", "2 large", "-3", "1/2-1"])
    def test_uninterpretable_is_none(self, text):
        """Test that uninterpretable text yields no value instead of raising."""
        assert parse_quantity(text) is None

    def test_zero_denominator(self):
        """Test that zero denominators never divide."""
        assert parse_quantity("1/0") is None
        assert parse_quantity("1 1/0") == 1.0

    @pytest.mark.parametrize(
        "text",
        ["9" * 400, "9" * 400 + "/1", "1/" + "9" * 400, "9" * 400 + "-2"],
    )
    def test_overflow_is_none(self, text):
        """Test that digits too long for a float yield no value instead of inf."""
        assert parse_quantity(text) is None

    def test_vulgar_fractions(self):
        """Test unicode fraction glyphs."""
        assert parse_quantity("½") == 0.5
        assert parse_quantity("1½") == 1.5
        assert parse_quantity("2 ¼") == 2.25


class TestRuleOrder:
    """Tests for the ordered parse rules."""

    def test_rule_order(self):
        """Test that the decimal rule runs before fraction and range rules."""
        assert [name for name, _ in QUANTITY_RULES] == ["decimal", "fraction", "range"]

    def test_fraction_rule_alone_cannot_read_mixed_fraction(self):
        """Test why the decimal rule must come first for '1 1/2'."""
        assert parse_simple_fraction("1 1/2") is None
        assert parse_leading_decimal("1 1/2") == 1.5

    def test_decimal_rule_rejects_fraction(self):
        """Test that a bare fraction falls through the decimal rule."""
        assert parse_leading_decimal("1/2") is None

    def test_range_rule_needs_hyphen(self):
        """Test that the range rule ignores text without a hyphen."""
        assert parse_range_minimum("2") is None
        assert parse_range_minimum("2-3") == 2.0
