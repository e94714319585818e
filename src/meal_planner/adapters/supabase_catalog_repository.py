"""Supabase repository for saved ingredient catalogs."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from meal_planner.domain.ingredients import Catalog
from meal_planner.domain.serialization import catalog_from_dict, catalog_to_dict
from meal_planner.services.library import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase implementation for one catalog per user."""

    client: Client

    def save_catalog(self, user_key: str, catalog: Catalog) -> None:
        """Insert or replace the user's catalog."""
        self.client.table("ingredient_catalogs").upsert(
            {
                "user_key": user_key,
                "catalog_json": catalog_to_dict(catalog),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_key",
        ).execute()

    def get_catalog(self, user_key: str) -> Catalog | None:
        """Return the user's catalog, if stored."""
        response = (
            self.client.table("ingredient_catalogs")
            .select("catalog_json")
            .eq("user_key", user_key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return catalog_from_dict(response.data[0]["catalog_json"])
