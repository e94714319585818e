"""Flavor compatibility rules for meal candidates."""

from meal_planner.domain.ingredients import Ingredient

UNIVERSAL_FLAVORS = frozenset({"mild", "neutral", "savory"})


def has_universal_flavor(ingredient: Ingredient) -> bool:
    """Return True when any flavor tag pairs with anything."""
    return any(flavor.lower() in UNIVERSAL_FLAVORS for flavor in ingredient.flavor_profile)


def are_flavor_profiles_compatible(first: Ingredient, second: Ingredient) -> bool:
    """Return True if either side is universal or the two share a tag."""
    if has_universal_flavor(first) or has_universal_flavor(second):
        return True
    return bool(set(first.flavor_profile) & set(second.flavor_profile))


def is_meal_compatible(
    protein: Ingredient,
    grain: Ingredient,
    vegetable: Ingredient,
    sauce: Ingredient,
) -> bool:
    """Check the sauce against every component and the protein against the vegetable.

    Protein/grain and grain/vegetable are not compared.
    """
    return (
        are_flavor_profiles_compatible(protein, sauce)
        and are_flavor_profiles_compatible(grain, sauce)
        and are_flavor_profiles_compatible(vegetable, sauce)
        and are_flavor_profiles_compatible(protein, vegetable)
    )
