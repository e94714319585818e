"""Meal assembly from four chosen ingredients."""

import random

from meal_planner.domain.ingredients import Ingredient
from meal_planner.domain.plans import Meal, new_meal_id

COOKING_METHODS = (
    "grilled",
    "baked",
    "air-fried",
    "pan-seared",
    "slow-cooked",
    "steamed",
    "poached",
    "stir-fried",
    "roasted",
    "sautéed",
    "sauteed",
)
DEFAULT_METHODS = ("Roasted", "Grilled", "Pan-Seared")


def build_meal(
    protein: Ingredient,
    grain: Ingredient,
    vegetable: Ingredient,
    sauce: Ingredient,
    rng: random.Random | None = None,
) -> Meal:
    """Combine four ingredients into a named, priced meal."""
    cost = round(protein.cost + grain.cost + vegetable.cost + sauce.cost, 2)
    return Meal(
        id=new_meal_id(),
        name=generate_meal_name(protein, grain, vegetable, sauce, rng=rng),
        protein=protein,
        grain=grain,
        vegetable=vegetable,
        sauce=sauce,
        cost=cost,
    )


def generate_meal_name(
    protein: Ingredient,
    grain: Ingredient,
    vegetable: Ingredient,
    sauce: Ingredient,
    rng: random.Random | None = None,
) -> str:
    """Return "<Method> <Protein> with <Sauce> <Vegetable> and <Grain>"."""
    dish = f"{protein.name} with {sauce.name} {vegetable.name} and {grain.name}"
    if mentions_cooking_method(protein.name):
        return dish
    method = declared_cooking_method(protein)
    if method is None:
        method = (rng or random).choice(DEFAULT_METHODS)
    return f"{method} {dish}"


def declared_cooking_method(protein: Ingredient) -> str | None:
    """Return the protein's cooking-method attribute in title case, if any."""
    for attribute in protein.attributes:
        if attribute.strip().lower() in COOKING_METHODS:
            return attribute.strip().title()
    return None


def mentions_cooking_method(name: str) -> bool:
    lowered = name.lower()
    return any(method in lowered for method in COOKING_METHODS)
