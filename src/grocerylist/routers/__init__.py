"""API routers for the grocerylist service."""

from grocerylist.routers.shopping_lists import router as shopping_lists_router

__all__ = [
    "shopping_lists_router",
]
