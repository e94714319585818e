"""Multi-week meal plan orchestration."""

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from meal_planner.domain.ingredients import Catalog
from meal_planner.domain.plans import Meal, MealPlan, ShoppingList
from meal_planner.services.catalog import fallback_catalog
from meal_planner.services.library import PlanLibraryService
from meal_planner.services.shopping import build_shopping_list, combine_shopping_lists
from meal_planner.services.weekly import (
    FAVORITE_PROBABILITY,
    IngredientUsage,
    WeeklyPlanGenerator,
)

_logger = logging.getLogger(__name__)


class BudgetDefault(Enum):
    """Marker for "use the configured budget"; an explicit None means no budget."""

    CONFIGURED = "configured"


@dataclass(frozen=True)
class PlanOptions:
    """Options for a plan generation run.

    ``meals_per_week`` is accepted for callers but the weekly generator always
    fills ``MEALS_PER_WEEK`` slots.
    """

    weeks_count: int = 4
    meals_per_week: int = 4
    budget_per_week: float | None = None
    favorite_recipes: Sequence[Meal] = ()
    favorite_probability: float = FAVORITE_PROBABILITY


def generate_plan(
    catalog: Catalog,
    options: PlanOptions | None = None,
    rng: random.Random | None = None,
) -> MealPlan:
    """Generate a plan week by week, sharing ingredient usage across weeks."""
    resolved = options or PlanOptions()
    usage = IngredientUsage()
    generator = WeeklyPlanGenerator(
        catalog=catalog,
        usage=usage,
        favorite_recipes=tuple(resolved.favorite_recipes),
        budget_per_week=resolved.budget_per_week,
        rng=rng or random.Random(),
        favorite_probability=resolved.favorite_probability,
    )
    weeks = tuple(
        generator.generate(week_number)
        for week_number in range(1, (resolved.weeks_count or 4) + 1)
    )
    total_cost = round(sum(meal.cost for week in weeks for meal in week.meals), 2)
    plan = MealPlan(plan_id=f"plan-{uuid4().hex}", weeks=weeks, total_cost=total_cost)
    _logger.info(
        "Generated meal plan: plan_id=%s weeks=%s total_cost=%.2f",
        plan.plan_id,
        len(weeks),
        total_cost,
    )
    return plan


@dataclass
class MealPlanService:
    """Generates plans for a user from their saved catalog and favorites."""

    library_service: PlanLibraryService
    default_weeks_count: int = 4
    default_meals_per_week: int = 4
    default_budget_per_week: float | None = None
    favorite_probability: float = FAVORITE_PROBABILITY

    def resolve_catalog(self, user_key: str, catalog: Catalog | None = None) -> Catalog:
        """Return the given catalog, the user's saved one, or the demo catalog."""
        resolved = catalog
        if resolved is None:
            resolved = self.library_service.get_catalog(user_key)
        if resolved is None:
            _logger.info("No saved catalog, using fallback: user_key=%s", user_key)
            resolved = fallback_catalog()
        resolved.require_complete()
        return resolved

    def generate(  # noqa: PLR0913
        self,
        user_key: str,
        catalog: Catalog | None = None,
        weeks_count: int | None = None,
        meals_per_week: int | None = None,
        budget_per_week: float | None | BudgetDefault = BudgetDefault.CONFIGURED,
        use_favorites: bool = True,
        rng: random.Random | None = None,
    ) -> MealPlan:
        """Generate a fresh plan; raises EmptyCategoryError for incomplete catalogs."""
        resolved_catalog = self.resolve_catalog(user_key, catalog)
        favorites = (
            self.library_service.list_favorites(user_key) if use_favorites else []
        )
        options = self.build_options(
            weeks_count=weeks_count,
            meals_per_week=meals_per_week,
            budget_per_week=budget_per_week,
            favorites=favorites,
        )
        return generate_plan(resolved_catalog, options, rng=rng)

    def build_options(
        self,
        weeks_count: int | None = None,
        meals_per_week: int | None = None,
        budget_per_week: float | None | BudgetDefault = BudgetDefault.CONFIGURED,
        favorites: Sequence[Meal] = (),
    ) -> PlanOptions:
        """Fill unset options from the service defaults.

        Passing ``budget_per_week=None`` disables the budget even when a default
        is configured.
        """
        if isinstance(budget_per_week, BudgetDefault):
            budget_per_week = self.default_budget_per_week
        return PlanOptions(
            weeks_count=weeks_count or self.default_weeks_count,
            meals_per_week=meals_per_week or self.default_meals_per_week,
            budget_per_week=budget_per_week,
            favorite_recipes=tuple(favorites),
            favorite_probability=self.favorite_probability,
        )

    def shopping_list(
        self, user_key: str, saved_id: str, week_number: int | None = None
    ) -> ShoppingList | None:
        """Return the shopping list of a saved plan's week, or the whole plan."""
        saved = self.library_service.get_plan(user_key, saved_id)
        if saved is None:
            return None
        if week_number is None:
            return combine_shopping_lists(saved.plan.weeks)
        weekly_plan = saved.plan.week(week_number)
        if weekly_plan is None:
            return None
        return build_shopping_list(weekly_plan)
