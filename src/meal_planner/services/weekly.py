"""Weekly meal plan generation.

Each slot of a week is filled by the first phase that produces a meal:

1. ``FAVORITE``: with some probability, reuse one of the user's favorite
   recipes unless all of its ingredients were already placed this week.
2. ``SCORED``: up to ``SCORED_ATTEMPTS`` draws from the top-ranked candidates
   of each category, accepting the first compatible meal within budget.
3. ``RANDOM_FALLBACK``: up to ``FALLBACK_ATTEMPTS`` uniform random draws,
   accepting the first compatible meal and ignoring the budget.
4. ``LAST_RESORT``: one uniform random draw accepted unconditionally.

Phases only move forward, so a slot costs at most
``SCORED_ATTEMPTS + FALLBACK_ATTEMPTS + 1`` candidate draws.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from meal_planner.domain.ingredients import Catalog, Category, Ingredient
from meal_planner.domain.plans import Meal, WeeklyPlan
from meal_planner.services.compatibility import is_meal_compatible
from meal_planner.services.meals import build_meal
from meal_planner.services.scoring import score_ingredient

MEALS_PER_WEEK = 4
SCORED_ATTEMPTS = 20
FALLBACK_ATTEMPTS = 10
TOP_CANDIDATES = 3
FAVORITE_PROBABILITY = 0.3

_logger = logging.getLogger(__name__)


class SlotPhase(Enum):
    """Phase that filled a meal slot."""

    FAVORITE = "favorite"
    SCORED = "scored"
    RANDOM_FALLBACK = "random_fallback"
    LAST_RESORT = "last_resort"


@dataclass
class IngredientUsage:
    """Cross-week selection counts for one plan generation run."""

    counts: dict[str, int] = field(default_factory=dict)

    def record(self, ingredients: Iterable[Ingredient]) -> None:
        """Increment the count of every given ingredient."""
        for ingredient in ingredients:
            self.counts[ingredient.id] = self.counts.get(ingredient.id, 0) + 1

    def count(self, ingredient_id: str) -> int:
        return self.counts.get(ingredient_id, 0)

    def snapshot(self) -> dict[str, int]:
        return dict(self.counts)


@dataclass
class WeeklyUsage:
    """Ingredient ids already placed this week, per category."""

    used: dict[Category, set[str]] = field(
        default_factory=lambda: {category: set() for category in Category}
    )

    def record(self, meal: Meal) -> None:
        for ingredient in meal.ingredients():
            self.used[ingredient.category].add(ingredient.id)

    def used_ids(self, category: Category) -> set[str]:
        return self.used[category]

    def covers(self, meal: Meal) -> bool:
        """Return True when every ingredient of the meal is already used."""
        return all(
            ingredient.id in self.used[ingredient.category]
            for ingredient in meal.ingredients()
        )


def favorite_ids_by_category(favorites: Iterable[Meal]) -> dict[Category, set[str]]:
    """Collect the ingredient ids of favorite recipes per category."""
    ids: dict[Category, set[str]] = {category: set() for category in Category}
    for meal in favorites:
        ids[Category.PROTEIN].add(meal.protein.id)
        ids[Category.GRAIN].add(meal.grain.id)
        ids[Category.VEGETABLE].add(meal.vegetable.id)
        ids[Category.SAUCE].add(meal.sauce.id)
    return ids


@dataclass
class WeeklyPlanGenerator:
    """Fills the meal slots of a single week."""

    catalog: Catalog
    usage: IngredientUsage
    favorite_recipes: Sequence[Meal] = ()
    budget_per_week: float | None = None
    rng: random.Random = field(default_factory=random.Random)
    favorite_probability: float = FAVORITE_PROBABILITY

    def __post_init__(self) -> None:
        self._favorite_ids = favorite_ids_by_category(self.favorite_recipes)

    def generate(self, week_number: int) -> WeeklyPlan:
        """Generate the meals for one week, updating ``usage`` in place."""
        weekly_usage = WeeklyUsage()
        meals: list[Meal] = []
        for slot in range(MEALS_PER_WEEK):
            meal, phase = self._fill_slot(meals, weekly_usage)
            if phase is not SlotPhase.SCORED:
                _logger.debug(
                    "Week %s slot %s filled by %s phase",
                    week_number,
                    slot + 1,
                    phase.value,
                )
            meals.append(meal)
        return WeeklyPlan(week_number=week_number, meals=tuple(meals))

    def _fill_slot(
        self, meals: list[Meal], weekly_usage: WeeklyUsage
    ) -> tuple[Meal, SlotPhase]:
        meal = self._favorite_phase(weekly_usage)
        if meal is not None:
            return meal, SlotPhase.FAVORITE
        running_cost = sum(existing.cost for existing in meals)
        meal = self._scored_phase(weekly_usage, running_cost)
        if meal is not None:
            return meal, SlotPhase.SCORED
        meal = self._random_fallback_phase()
        if meal is not None:
            return meal, SlotPhase.RANDOM_FALLBACK
        return self._last_resort_phase(), SlotPhase.LAST_RESORT

    def _favorite_phase(self, weekly_usage: WeeklyUsage) -> Meal | None:
        if not self.favorite_recipes:
            return None
        if self.rng.random() >= self.favorite_probability:
            return None
        favorite = self.rng.choice(self.favorite_recipes)
        if weekly_usage.covers(favorite):
            return None
        meal = favorite.clone()
        self.usage.record(meal.ingredients())
        weekly_usage.record(meal)
        return meal

    def _scored_phase(
        self, weekly_usage: WeeklyUsage, running_cost: float
    ) -> Meal | None:
        for _ in range(SCORED_ATTEMPTS):
            protein, grain, vegetable, sauce = (
                self._pick_top_candidate(category, weekly_usage)
                for category in Category
            )
            if not is_meal_compatible(protein, grain, vegetable, sauce):
                continue
            meal = build_meal(protein, grain, vegetable, sauce, rng=self.rng)
            if self.budget_per_week and running_cost + meal.cost > self.budget_per_week:
                continue
            self.usage.record(meal.ingredients())
            weekly_usage.record(meal)
            return meal
        return None

    def _random_fallback_phase(self) -> Meal | None:
        for _ in range(FALLBACK_ATTEMPTS):
            protein, grain, vegetable, sauce = self._pick_random()
            if is_meal_compatible(protein, grain, vegetable, sauce):
                meal = build_meal(protein, grain, vegetable, sauce, rng=self.rng)
                self.usage.record(meal.ingredients())
                return meal
        return None

    def _last_resort_phase(self) -> Meal:
        protein, grain, vegetable, sauce = self._pick_random()
        return build_meal(protein, grain, vegetable, sauce, rng=self.rng)

    def _pick_top_candidate(
        self, category: Category, weekly_usage: WeeklyUsage
    ) -> Ingredient:
        used_ids = weekly_usage.used_ids(category)
        favorite_ids = self._favorite_ids[category]
        ranked = sorted(
            self.catalog.for_category(category),
            key=lambda ingredient: score_ingredient(
                ingredient, self.usage.counts, used_ids, favorite_ids
            ),
            reverse=True,
        )
        return self.rng.choice(ranked[:TOP_CANDIDATES])

    def _pick_random(self) -> tuple[Ingredient, Ingredient, Ingredient, Ingredient]:
        protein, grain, vegetable, sauce = (
            self.rng.choice(self.catalog.for_category(category))
            for category in Category
        )
        return protein, grain, vegetable, sauce


def generate_week(  # noqa: PLR0913
    catalog: Catalog,
    week_number: int,
    usage: IngredientUsage,
    favorite_recipes: Sequence[Meal] = (),
    budget_per_week: float | None = None,
    rng: random.Random | None = None,
) -> WeeklyPlan:
    """Generate one week of meals; ``usage`` is mutated in place."""
    generator = WeeklyPlanGenerator(
        catalog=catalog,
        usage=usage,
        favorite_recipes=favorite_recipes,
        budget_per_week=budget_per_week,
        rng=rng or random.Random(),
    )
    return generator.generate(week_number)
