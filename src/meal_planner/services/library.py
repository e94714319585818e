"""Saved plans, favorite recipes and saved catalogs per user."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from meal_planner.domain.ingredients import Catalog
from meal_planner.domain.plans import Meal, MealPlan, SavedMealPlan


class StorageError(RuntimeError):
    """Raised by repositories when the backing store rejects an operation."""


class PlanRepository(Protocol):
    """Persistence interface for saved meal plans."""

    def save_plan(self, user_key: str, saved: SavedMealPlan) -> SavedMealPlan:
        """Store a saved plan and return it."""

    def list_plans(self, user_key: str) -> list[SavedMealPlan]:
        """Return a user's saved plans, newest first."""

    def get_plan(self, user_key: str, saved_id: str) -> SavedMealPlan | None:
        """Return a saved plan by id, if present."""

    def delete_plan(self, user_key: str, saved_id: str) -> None:
        """Delete a saved plan."""


class FavoritesRepository(Protocol):
    """Persistence interface for favorite recipes."""

    def add_favorite(self, user_key: str, meal: Meal) -> None:
        """Store a favorite recipe."""

    def remove_favorite(self, user_key: str, meal_id: str) -> None:
        """Remove a favorite recipe by meal id."""

    def list_favorites(self, user_key: str) -> list[Meal]:
        """Return a user's favorite recipes."""


class CatalogRepository(Protocol):
    """Persistence interface for a user's ingredient catalog."""

    def save_catalog(self, user_key: str, catalog: Catalog) -> None:
        """Replace the stored catalog."""

    def get_catalog(self, user_key: str) -> Catalog | None:
        """Return the stored catalog, if any."""


@dataclass
class PlanLibraryService:
    """Application service for everything a user keeps between sessions."""

    plan_repository: PlanRepository
    favorites_repository: FavoritesRepository
    catalog_repository: CatalogRepository

    def save_plan(self, user_key: str, plan: MealPlan, name: str) -> SavedMealPlan:
        """Save a generated plan under a display name."""
        saved = SavedMealPlan(
            id=f"plan_{uuid4().hex}",
            name=name.strip() or "Meal plan",
            saved_at=datetime.now(tz=UTC),
            plan=plan,
        )
        return self.plan_repository.save_plan(user_key, saved)

    def list_plans(self, user_key: str) -> list[SavedMealPlan]:
        return self.plan_repository.list_plans(user_key)

    def get_plan(self, user_key: str, saved_id: str) -> SavedMealPlan | None:
        return self.plan_repository.get_plan(user_key, saved_id)

    def delete_plan(self, user_key: str, saved_id: str) -> None:
        self.plan_repository.delete_plan(user_key, saved_id)

    def add_favorite(self, user_key: str, meal: Meal) -> list[Meal]:
        """Mark a meal as favorite; duplicates by meal id are ignored."""
        favorites = self.favorites_repository.list_favorites(user_key)
        if all(existing.id != meal.id for existing in favorites):
            self.favorites_repository.add_favorite(user_key, meal)
            favorites.append(meal)
        return favorites

    def remove_favorite(self, user_key: str, meal_id: str) -> None:
        self.favorites_repository.remove_favorite(user_key, meal_id)

    def list_favorites(self, user_key: str) -> list[Meal]:
        return self.favorites_repository.list_favorites(user_key)

    def save_catalog(self, user_key: str, catalog: Catalog) -> None:
        self.catalog_repository.save_catalog(user_key, catalog)

    def get_catalog(self, user_key: str) -> Catalog | None:
        return self.catalog_repository.get_catalog(user_key)
