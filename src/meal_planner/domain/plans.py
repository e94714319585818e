"""Domain models for generated meal plans."""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import uuid4

from meal_planner.domain.ingredients import Ingredient


def new_meal_id() -> str:
    """Return a fresh meal identifier."""
    return f"meal-{uuid4().hex[:12]}"


@dataclass(frozen=True)
class Meal:
    """One protein, grain, vegetable and sauce combined into a dish."""

    id: str
    name: str
    protein: Ingredient
    grain: Ingredient
    vegetable: Ingredient
    sauce: Ingredient
    cost: float

    def ingredients(self) -> tuple[Ingredient, Ingredient, Ingredient, Ingredient]:
        """Return the four ingredients in category order."""
        return (self.protein, self.grain, self.vegetable, self.sauce)

    def clone(self) -> "Meal":
        """Return the same meal under a new id."""
        return replace(self, id=new_meal_id())


@dataclass(frozen=True)
class WeeklyPlan:
    """Meals planned for one week."""

    week_number: int
    meals: tuple[Meal, ...]

    @property
    def cost(self) -> float:
        return round(sum(meal.cost for meal in self.meals), 2)


@dataclass(frozen=True)
class MealPlan:
    """Multi-week plan produced by a single generation run."""

    plan_id: str
    weeks: tuple[WeeklyPlan, ...]
    total_cost: float

    def week(self, week_number: int) -> WeeklyPlan | None:
        """Return a week by its number, if present."""
        for weekly_plan in self.weeks:
            if weekly_plan.week_number == week_number:
                return weekly_plan
        return None


@dataclass(frozen=True)
class ShoppingItem:
    """Quantity and cost of one ingredient to buy."""

    ingredient: Ingredient
    quantity: int
    cost: float


@dataclass(frozen=True)
class ShoppingList:
    """Aggregated ingredients for a week of meals."""

    week_number: int
    items: tuple[ShoppingItem, ...]
    total_cost: float


@dataclass(frozen=True)
class SavedMealPlan:
    """A plan stored in a user's library."""

    id: str
    name: str
    saved_at: datetime
    plan: MealPlan
