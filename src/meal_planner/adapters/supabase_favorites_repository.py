"""Supabase repository for favorite recipes."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.plans import Meal
from meal_planner.domain.serialization import meal_from_dict, meal_to_dict
from meal_planner.services.library import FavoritesRepository, StorageError


@dataclass
class SupabaseFavoritesRepository(FavoritesRepository):
    """Supabase implementation for favorite recipes."""

    client: Client

    def add_favorite(self, user_key: str, meal: Meal) -> None:
        """Insert a favorite recipe row."""
        response = (
            self.client.table("favorite_recipes")
            .insert(
                {
                    "user_key": user_key,
                    "meal_id": meal.id,
                    "meal_json": meal_to_dict(meal),
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to add favorite recipe")

    def remove_favorite(self, user_key: str, meal_id: str) -> None:
        """Delete a favorite recipe row."""
        self.client.table("favorite_recipes").delete().eq("user_key", user_key).eq(
            "meal_id", meal_id
        ).execute()

    def list_favorites(self, user_key: str) -> list[Meal]:
        """Return a user's favorite recipes."""
        response = (
            self.client.table("favorite_recipes")
            .select("meal_id, meal_json")
            .eq("user_key", user_key)
            .execute()
        )
        return [meal_from_dict(row["meal_json"]) for row in response.data or []]
