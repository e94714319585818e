"""Supabase repository for saved meal plans."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from meal_planner.domain.plans import SavedMealPlan
from meal_planner.domain.serialization import plan_from_dict, plan_to_dict
from meal_planner.services.library import PlanRepository, StorageError

_COLUMNS = "id, user_key, name, saved_at, plan_json"


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for saved meal plans."""

    client: Client

    def save_plan(self, user_key: str, saved: SavedMealPlan) -> SavedMealPlan:
        """Insert a saved plan row and return it."""
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "id": saved.id,
                    "user_key": user_key,
                    "name": saved.name,
                    "saved_at": saved.saved_at.isoformat(),
                    "plan_json": plan_to_dict(saved.plan),
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to save meal plan")
        return _parse_saved_plan(response.data[0])

    def list_plans(self, user_key: str) -> list[SavedMealPlan]:
        """Return a user's saved plans, newest first."""
        response = (
            self.client.table("meal_plans")
            .select(_COLUMNS)
            .eq("user_key", user_key)
            .order("saved_at", desc=True)
            .execute()
        )
        return [_parse_saved_plan(row) for row in response.data or []]

    def get_plan(self, user_key: str, saved_id: str) -> SavedMealPlan | None:
        """Return a saved plan by id, if present."""
        response = (
            self.client.table("meal_plans")
            .select(_COLUMNS)
            .eq("user_key", user_key)
            .eq("id", saved_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_saved_plan(response.data[0])

    def delete_plan(self, user_key: str, saved_id: str) -> None:
        """Delete a saved plan."""
        self.client.table("meal_plans").delete().eq("user_key", user_key).eq(
            "id", saved_id
        ).execute()


def _parse_saved_plan(row: dict[str, object]) -> SavedMealPlan:
    return SavedMealPlan(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        saved_at=datetime.fromisoformat(str(row["saved_at"])),
        plan=plan_from_dict(row["plan_json"]),
    )
