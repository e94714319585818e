"""Candidate scoring for ingredient selection."""

from collections.abc import Collection, Mapping

from meal_planner.domain.ingredients import Ingredient

REUSE_BONUS = 10
NOVELTY_BONUS = 2
OVERUSE_PENALTY = 5
OVERUSE_THRESHOLD = 2
SAME_WEEK_PENALTY = 15
FAVORITE_BONUS = 20


def score_ingredient(
    ingredient: Ingredient,
    global_usage: Mapping[str, int],
    weekly_used_ids: Collection[str],
    favorite_ids: Collection[str] | None = None,
) -> int:
    """Score how desirable an ingredient is for the next slot.

    Moderate reuse (1-2 prior uses) is rewarded because it keeps the shopping
    list short; heavier reuse is penalized progressively. Ingredients already
    placed in the same category this week are pushed down hard, and favorites
    are pushed up harder still.
    """
    score = 0
    if ingredient.id in global_usage:
        count = global_usage[ingredient.id]
        if 1 <= count <= OVERUSE_THRESHOLD:
            score += REUSE_BONUS
        elif count > OVERUSE_THRESHOLD:
            score -= OVERUSE_PENALTY * (count - OVERUSE_THRESHOLD)
    else:
        score += NOVELTY_BONUS

    if ingredient.id in weekly_used_ids:
        score -= SAME_WEEK_PENALTY

    if favorite_ids and ingredient.id in favorite_ids:
        score += FAVORITE_BONUS

    return score
