"""Exceptions raised by the shopping list service."""


class GroceryListError(Exception):
    """Base class for grocerylist errors."""


class NoIngredientsError(GroceryListError):
    """Raised when a meal plan yields no ingredients to shop for."""

    def __init__(self, meal_plan_id: str | None = None):
        self.meal_plan_id = meal_plan_id
        if meal_plan_id:
            message = f"No ingredients found in meal plan {meal_plan_id}"
        else:
            message = "No ingredients provided"
        super().__init__(message)
