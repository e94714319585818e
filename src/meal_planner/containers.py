"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from meal_planner.adapters.supabase_favorites_repository import (
    SupabaseFavoritesRepository,
)
from meal_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from meal_planner.config import Settings
from meal_planner.services.catalog import CatalogService
from meal_planner.services.estimation import LookupCostEstimator, LookupFlavorEstimator
from meal_planner.services.library import PlanLibraryService
from meal_planner.services.planner import MealPlanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    library_service: PlanLibraryService
    meal_plan_service: MealPlanService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    library_service = PlanLibraryService(
        plan_repository=SupabasePlanRepository(supabase_client),
        favorites_repository=SupabaseFavoritesRepository(supabase_client),
        catalog_repository=SupabaseCatalogRepository(supabase_client),
    )
    catalog_service = CatalogService(
        cost_estimator=LookupCostEstimator(),
        flavor_estimator=LookupFlavorEstimator(),
    )
    meal_plan_service = MealPlanService(
        library_service=library_service,
        default_weeks_count=resolved_settings.weeks_count,
        default_meals_per_week=resolved_settings.meals_per_week,
        default_budget_per_week=resolved_settings.budget_per_week,
        favorite_probability=resolved_settings.favorite_injection_probability,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        library_service=library_service,
        meal_plan_service=meal_plan_service,
    )
