"""Tests for the shopping list API routes."""

import pytest
from fastapi.testclient import TestClient

from grocerylist.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestGenerateShoppingList:
    """Tests for POST /api/v1/shopping-lists/generate."""

    def test_generate(self, client):
        """Test building a list from ingredients and pantry."""
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "ingredients": [
                    {"name": "Flour", "quantity": "1", "unit": "cup", "category": "baking"},
                    {"name": "flour", "quantity": "2", "unit": "Cups", "category": "bakery"},
                    {"name": "Rice", "quantity": "5", "unit": "cup", "category": "grains"},
                    {"name": "Basil", "quantity": "a handful", "category": "herbs"},
                ],
                "pantry": [{"name": "rice", "quantity": 2, "unit": "cup"}],
                "week_start": "2025-01-08",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Meal Plan — Week of Jan 6"
        assert data["all_in_pantry"] is False
        assert data["list_id"] is None

        items = {item["name"]: item for item in data["items"]}
        assert items["Flour"]["quantity"] == 3.0
        assert items["Flour"]["unit"] == "cup"
        assert items["Flour"]["category"] == "bakery"
        assert items["Rice"]["quantity"] == 3.0
        assert items["Basil"]["quantity"] is None
        assert items["Basil"]["category"] == "produce"

        assert set(data["items_by_category"]) == {"bakery", "pantry", "produce"}

    def test_generate_custom_name(self, client):
        """Test that a client-supplied name is used."""
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={"ingredients": [{"name": "lemon", "quantity": "2"}], "name": "Weekend"},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Weekend"

    def test_generate_all_in_pantry(self, client):
        """Test the nothing-to-buy response."""
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "ingredients": [{"name": "Salt", "quantity": "1", "unit": "kg"}],
                "pantry": [{"name": "salt", "quantity": 2, "unit": "kg"}],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["all_in_pantry"] is True
        assert data["message"] == "All ingredients are already in your pantry"
        assert data["list_id"] is None
        assert data["items"] == []

    def test_generate_without_ingredients(self, client):
        """Test that an empty request is rejected."""
        response = client.post("/api/v1/shopping-lists/generate", json={"ingredients": []})

        assert response.status_code == 400
        assert response.json()["detail"] == "No ingredients provided"

    def test_generate_rejects_negative_pantry_quantity(self, client):
        """Test pantry input validation."""
        response = client.post(
            "/api/v1/shopping-lists/generate",
            json={
                "ingredients": [{"name": "rice", "quantity": "1", "unit": "cup"}],
                "pantry": [{"name": "rice", "quantity": -1, "unit": "cup"}],
            },
        )

        assert response.status_code == 422


def test_list_categories(client):
    """Test listing canonical categories."""
    response = client.get("/api/v1/shopping-lists/categories")

    assert response.status_code == 200
    categories = response.json()
    assert "produce" in categories
    assert "other" in categories
    assert categories == sorted(categories)
