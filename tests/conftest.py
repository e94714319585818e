"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from meal_planner.config import Settings
from meal_planner.containers import AppContainer
from meal_planner.domain.ingredients import Catalog, Category, Ingredient
from meal_planner.domain.plans import Meal, SavedMealPlan
from meal_planner.services.catalog import CatalogService
from meal_planner.services.estimation import LookupCostEstimator, LookupFlavorEstimator
from meal_planner.services.library import (
    CatalogRepository,
    FavoritesRepository,
    PlanLibraryService,
    PlanRepository,
)
from meal_planner.services.planner import MealPlanService


@dataclass
class InMemoryPlanRepository(PlanRepository):
    """In-memory saved plan repository for tests."""

    plans: dict[str, dict[str, SavedMealPlan]] = field(default_factory=dict)

    def save_plan(self, user_key: str, saved: SavedMealPlan) -> SavedMealPlan:
        self.plans.setdefault(user_key, {})[saved.id] = saved
        return saved

    def list_plans(self, user_key: str) -> list[SavedMealPlan]:
        return sorted(
            self.plans.get(user_key, {}).values(),
            key=lambda saved: saved.saved_at,
            reverse=True,
        )

    def get_plan(self, user_key: str, saved_id: str) -> SavedMealPlan | None:
        return self.plans.get(user_key, {}).get(saved_id)

    def delete_plan(self, user_key: str, saved_id: str) -> None:
        self.plans.get(user_key, {}).pop(saved_id, None)


@dataclass
class InMemoryFavoritesRepository(FavoritesRepository):
    """In-memory favorites repository for tests."""

    favorites: dict[str, list[Meal]] = field(default_factory=dict)

    def add_favorite(self, user_key: str, meal: Meal) -> None:
        self.favorites.setdefault(user_key, []).append(meal)

    def remove_favorite(self, user_key: str, meal_id: str) -> None:
        self.favorites[user_key] = [
            meal for meal in self.favorites.get(user_key, []) if meal.id != meal_id
        ]

    def list_favorites(self, user_key: str) -> list[Meal]:
        return list(self.favorites.get(user_key, []))


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """In-memory catalog repository for tests."""

    catalogs: dict[str, Catalog] = field(default_factory=dict)

    def save_catalog(self, user_key: str, catalog: Catalog) -> None:
        self.catalogs[user_key] = catalog

    def get_catalog(self, user_key: str) -> Catalog | None:
        return self.catalogs.get(user_key)


def make_ingredient(
    ingredient_id: str,
    name: str,
    category: Category,
    cost: float,
    *flavors: str,
    attributes: tuple[str, ...] = (),
) -> Ingredient:
    return Ingredient(
        id=ingredient_id,
        name=name,
        category=category,
        cost=cost,
        flavor_profile=flavors,
        attributes=attributes,
    )


def single_item_catalog() -> Catalog:
    """One ingredient per category, all mutually compatible."""
    return Catalog(
        proteins=(make_ingredient("p1", "Chicken", Category.PROTEIN, 4.0, "mild"),),
        grains=(make_ingredient("g1", "Rice", Category.GRAIN, 1.0, "mild"),),
        vegetables=(
            make_ingredient("v1", "Broccoli", Category.VEGETABLE, 2.0, "mild"),
        ),
        sauces=(make_ingredient("s1", "Soy", Category.SAUCE, 2.0, "salty"),),
    )


def incompatible_catalog() -> Catalog:
    """One ingredient per category with no shared or universal flavors."""
    return Catalog(
        proteins=(make_ingredient("p1", "Salmon", Category.PROTEIN, 9.0, "oceanic"),),
        grains=(make_ingredient("g1", "Farro", Category.GRAIN, 3.0, "chewy"),),
        vegetables=(make_ingredient("v1", "Kale", Category.VEGETABLE, 2.5, "bitter"),),
        sauces=(make_ingredient("s1", "Honey", Category.SAUCE, 4.0, "sweet"),),
    )


def wide_catalog(per_category: int = 6) -> Catalog:
    """Several mild ingredients per category, all mutually compatible."""

    def bucket(prefix: str, category: Category) -> tuple[Ingredient, ...]:
        return tuple(
            make_ingredient(
                f"{prefix}{index}",
                f"{category.value.title()} {index}",
                category,
                1.0 + index,
                "mild",
            )
            for index in range(1, per_category + 1)
        )

    return Catalog(
        proteins=bucket("p", Category.PROTEIN),
        grains=bucket("g", Category.GRAIN),
        vegetables=bucket("v", Category.VEGETABLE),
        sauces=bucket("s", Category.SAUCE),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        environment="test",
    )


@pytest.fixture
def plan_repository() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


@pytest.fixture
def favorites_repository() -> InMemoryFavoritesRepository:
    return InMemoryFavoritesRepository()


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository()


@pytest.fixture
def library_service(
    plan_repository: InMemoryPlanRepository,
    favorites_repository: InMemoryFavoritesRepository,
    catalog_repository: InMemoryCatalogRepository,
) -> PlanLibraryService:
    return PlanLibraryService(
        plan_repository=plan_repository,
        favorites_repository=favorites_repository,
        catalog_repository=catalog_repository,
    )


@pytest.fixture
def container(
    settings: Settings, library_service: PlanLibraryService
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog_service=CatalogService(
            cost_estimator=LookupCostEstimator(),
            flavor_estimator=LookupFlavorEstimator(),
        ),
        library_service=library_service,
        meal_plan_service=MealPlanService(
            library_service=library_service,
            default_weeks_count=settings.weeks_count,
            default_meals_per_week=settings.meals_per_week,
            default_budget_per_week=settings.budget_per_week,
            favorite_probability=settings.favorite_injection_probability,
        ),
    )
