"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import pytest

from grocerylist.config import get_settings
from grocerylist.schemas import IngredientRecord, PantryRecord

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Make every test read settings fresh from a clean environment."""
    monkeypatch.delenv("STRIP_COOKING_UNITS", raising=False)
    monkeypatch.delenv("DEFAULT_CATEGORY", raising=False)
    monkeypatch.delenv("LIST_NAME_TEMPLATE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Meal Plan Fixtures
# =============================================================================


@pytest.fixture
def week_ingredients():
    """Ingredients from three recipes planned for one week."""
    return [
        IngredientRecord(
            name="Spaghetti", quantity="500", unit="g", category="pasta", recipe_name="Bolognese"
        ),
        IngredientRecord(
            name="Ground beef", quantity="400", unit="grams", category="meat", recipe_name="Bolognese"
        ),
        IngredientRecord(
            name="Onion", quantity="1", unit=None, category="vegetables", recipe_name="Bolognese"
        ),
        IngredientRecord(
            name="Olive oil", quantity="2", unit="tbsp", category="oils", recipe_name="Bolognese"
        ),
        IngredientRecord(
            name="onion ", quantity="2", unit=None, category="Produce", recipe_name="Curry"
        ),
        IngredientRecord(
            name="Rice", quantity="1 1/2", unit="cups", category="grains", recipe_name="Curry"
        ),
        IngredientRecord(
            name="olive oil", quantity="1", unit="tablespoon", category="oils", recipe_name="Curry"
        ),
        IngredientRecord(
            name="Salt", quantity="to taste", unit=None, category="spices", recipe_name="Curry"
        ),
        IngredientRecord(
            name="Rice", quantity="1/2", unit="cup", category="Grains", recipe_name="Rice Pudding"
        ),
        IngredientRecord(
            name="Milk", quantity="1", unit="l", category="dairy", recipe_name="Rice Pudding"
        ),
    ]


@pytest.fixture
def week_pantry():
    """A pantry that partly covers the week."""
    return [
        PantryRecord(name="Rice", quantity=1, unit="cup"),
        PantryRecord(name="salt", quantity=None, unit=None),
        PantryRecord(name="Milk", quantity=500, unit="ml"),
        PantryRecord(name="Olive Oil", quantity=5, unit="tbsp"),
    ]


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def mock_meal_plan_source():
    """Mock meal plan source."""
    return AsyncMock()


@pytest.fixture
def mock_pantry_source():
    """Mock pantry source."""
    return AsyncMock()


@pytest.fixture
def mock_sink():
    """Mock shopping list sink that returns a fixed list ID."""
    sink = AsyncMock()
    sink.create_list.return_value = "list-123"
    return sink
