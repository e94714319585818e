"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from meal_planner.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from meal_planner.adapters.supabase_favorites_repository import (
    SupabaseFavoritesRepository,
)
from meal_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from meal_planner.domain.plans import SavedMealPlan
from meal_planner.domain.serialization import (
    catalog_to_dict,
    meal_to_dict,
    plan_to_dict,
)
from meal_planner.services.library import StorageError
from meal_planner.services.meals import build_meal
from meal_planner.services.planner import PlanOptions, generate_plan
from tests.conftest import single_item_catalog


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "upsert": [], "delete": []}
    )
    last_payload: object | None = None
    last_action: str | None = None
    last_options: dict[str, object] = field(default_factory=dict)
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def upsert(self, payload, **options) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_options = options
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.last_action = action
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _saved_plan() -> SavedMealPlan:
    return SavedMealPlan(
        id="plan_abc",
        name="Weeknights",
        saved_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        plan=generate_plan(single_item_catalog(), PlanOptions(weeks_count=1)),
    )


def _plan_row(saved: SavedMealPlan) -> dict[str, object]:
    return {
        "id": saved.id,
        "user_key": "user-1",
        "name": saved.name,
        "saved_at": saved.saved_at.isoformat(),
        "plan_json": plan_to_dict(saved.plan),
    }


def test_supabase_plan_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_plans")
    saved = _saved_plan()
    table.queue("insert", [_plan_row(saved)])
    table.queue("select", [_plan_row(saved)])

    repository = SupabasePlanRepository(client)
    created = repository.save_plan("user-1", saved)
    fetched = repository.get_plan("user-1", saved.id)

    assert created == saved
    assert fetched == saved
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_key"] == "user-1"
    assert ("id", saved.id) in table.last_filters


def test_supabase_plan_repository_list_and_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_plans")
    saved = _saved_plan()
    table.queue("select", [_plan_row(saved)])

    repository = SupabasePlanRepository(client)
    listed = repository.list_plans("user-1")
    missing = repository.get_plan("user-1", "plan_missing")
    repository.delete_plan("user-1", saved.id)

    assert [item.id for item in listed] == [saved.id]
    assert missing is None
    assert table.last_action == "delete"


def test_supabase_plan_repository_raises_on_failed_insert() -> None:
    repository = SupabasePlanRepository(FakeSupabaseClient())

    with pytest.raises(StorageError):
        repository.save_plan("user-1", _saved_plan())


def test_supabase_favorites_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("favorite_recipes")
    catalog = single_item_catalog()
    meal = build_meal(
        catalog.proteins[0], catalog.grains[0], catalog.vegetables[0], catalog.sauces[0]
    )
    row = {"user_key": "user-1", "meal_id": meal.id, "meal_json": meal_to_dict(meal)}
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseFavoritesRepository(client)
    repository.add_favorite("user-1", meal)
    favorites = repository.list_favorites("user-1")
    repository.remove_favorite("user-1", meal.id)

    assert favorites == [meal]
    assert ("meal_id", meal.id) in table.last_filters


def test_supabase_favorites_repository_raises_on_failed_insert() -> None:
    catalog = single_item_catalog()
    meal = build_meal(
        catalog.proteins[0], catalog.grains[0], catalog.vegetables[0], catalog.sauces[0]
    )

    with pytest.raises(StorageError):
        SupabaseFavoritesRepository(FakeSupabaseClient()).add_favorite("user-1", meal)


def test_supabase_catalog_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("ingredient_catalogs")
    catalog = single_item_catalog()

    repository = SupabaseCatalogRepository(client)
    assert repository.get_catalog("user-1") is None

    repository.save_catalog("user-1", catalog)
    assert table.last_options == {"on_conflict": "user_key"}
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["catalog_json"] == catalog_to_dict(catalog)

    table.queue("select", [{"catalog_json": catalog_to_dict(catalog)}])
    assert repository.get_catalog("user-1") == catalog
