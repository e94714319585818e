"""Conversions between domain models and JSON-compatible dicts."""

from datetime import datetime

from meal_planner.domain.ingredients import Catalog, Category, Ingredient
from meal_planner.domain.plans import (
    Meal,
    MealPlan,
    SavedMealPlan,
    ShoppingList,
    WeeklyPlan,
)


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "category": ingredient.category.value,
        "cost": ingredient.cost,
        "flavor_profile": list(ingredient.flavor_profile),
        "attributes": list(ingredient.attributes),
    }


def ingredient_from_dict(data: dict[str, object]) -> Ingredient:
    category = Category.parse(str(data.get("category") or ""))
    if category is None:
        raise ValueError(f"Unknown ingredient category: {data.get('category')!r}")
    return Ingredient(
        id=str(data["id"]),
        name=str(data.get("name") or ""),
        category=category,
        cost=float(data.get("cost") or 0),
        flavor_profile=tuple(data.get("flavor_profile") or ()),
        attributes=tuple(data.get("attributes") or ()),
    )


def catalog_to_dict(catalog: Catalog) -> dict[str, object]:
    return {
        "proteins": [ingredient_to_dict(item) for item in catalog.proteins],
        "grains": [ingredient_to_dict(item) for item in catalog.grains],
        "vegetables": [ingredient_to_dict(item) for item in catalog.vegetables],
        "sauces": [ingredient_to_dict(item) for item in catalog.sauces],
    }


def catalog_from_dict(data: dict[str, object]) -> Catalog:
    ingredients = [
        ingredient_from_dict(row)
        for key in ("proteins", "grains", "vegetables", "sauces")
        for row in data.get(key) or []
    ]
    return Catalog.from_ingredients(ingredients)


def meal_to_dict(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "protein": ingredient_to_dict(meal.protein),
        "grain": ingredient_to_dict(meal.grain),
        "vegetable": ingredient_to_dict(meal.vegetable),
        "sauce": ingredient_to_dict(meal.sauce),
        "cost": meal.cost,
    }


def meal_from_dict(data: dict[str, object]) -> Meal:
    return Meal(
        id=str(data["id"]),
        name=str(data.get("name") or ""),
        protein=ingredient_from_dict(data["protein"]),
        grain=ingredient_from_dict(data["grain"]),
        vegetable=ingredient_from_dict(data["vegetable"]),
        sauce=ingredient_from_dict(data["sauce"]),
        cost=float(data.get("cost") or 0),
    )


def weekly_plan_to_dict(weekly_plan: WeeklyPlan) -> dict[str, object]:
    return {
        "week_number": weekly_plan.week_number,
        "meals": [meal_to_dict(meal) for meal in weekly_plan.meals],
    }


def weekly_plan_from_dict(data: dict[str, object]) -> WeeklyPlan:
    return WeeklyPlan(
        week_number=int(data["week_number"]),
        meals=tuple(meal_from_dict(meal) for meal in data.get("meals") or []),
    )


def plan_to_dict(plan: MealPlan) -> dict[str, object]:
    return {
        "plan_id": plan.plan_id,
        "weeks": [weekly_plan_to_dict(week) for week in plan.weeks],
        "total_cost": plan.total_cost,
    }


def plan_from_dict(data: dict[str, object]) -> MealPlan:
    return MealPlan(
        plan_id=str(data["plan_id"]),
        weeks=tuple(weekly_plan_from_dict(week) for week in data.get("weeks") or []),
        total_cost=float(data.get("total_cost") or 0),
    )


def saved_plan_to_dict(saved: SavedMealPlan) -> dict[str, object]:
    return {
        "id": saved.id,
        "name": saved.name,
        "saved_at": saved.saved_at.isoformat(),
        "plan": plan_to_dict(saved.plan),
    }


def saved_plan_from_dict(data: dict[str, object]) -> SavedMealPlan:
    return SavedMealPlan(
        id=str(data["id"]),
        name=str(data.get("name") or ""),
        saved_at=datetime.fromisoformat(str(data["saved_at"])),
        plan=plan_from_dict(data["plan"]),
    )


def shopping_list_to_dict(shopping_list: ShoppingList) -> dict[str, object]:
    return {
        "week_number": shopping_list.week_number,
        "items": [
            {
                "ingredient": ingredient_to_dict(item.ingredient),
                "quantity": item.quantity,
                "cost": item.cost,
            }
            for item in shopping_list.items
        ],
        "total_cost": shopping_list.total_cost,
    }
