"""Shopping list aggregation."""

from collections.abc import Iterable

from meal_planner.domain.ingredients import Ingredient
from meal_planner.domain.plans import Meal, ShoppingItem, ShoppingList, WeeklyPlan


def build_shopping_list(weekly_plan: WeeklyPlan) -> ShoppingList:
    """Collapse a week's meals into per-ingredient quantities and costs."""
    items = _aggregate(weekly_plan.meals)
    return ShoppingList(
        week_number=weekly_plan.week_number,
        items=items,
        total_cost=round(sum(item.cost for item in items), 2),
    )


def combine_shopping_lists(weekly_plans: Iterable[WeeklyPlan]) -> ShoppingList:
    """Aggregate several weeks into one list with week number 0."""
    meals = [meal for weekly_plan in weekly_plans for meal in weekly_plan.meals]
    items = _aggregate(meals)
    return ShoppingList(
        week_number=0,
        items=items,
        total_cost=round(sum(item.cost for item in items), 2),
    )


def _aggregate(meals: Iterable[Meal]) -> tuple[ShoppingItem, ...]:
    """Count ingredients by id, keeping first-encountered order."""
    ingredients: dict[str, Ingredient] = {}
    quantities: dict[str, int] = {}
    for meal in meals:
        for ingredient in meal.ingredients():
            ingredients.setdefault(ingredient.id, ingredient)
            quantities[ingredient.id] = quantities.get(ingredient.id, 0) + 1
    # Cost is recomputed from the unit price, never summed per meal.
    return tuple(
        ShoppingItem(
            ingredient=ingredient,
            quantity=quantities[ingredient_id],
            cost=round(ingredient.cost * quantities[ingredient_id], 2),
        )
        for ingredient_id, ingredient in ingredients.items()
    )
