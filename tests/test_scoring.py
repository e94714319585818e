"""Tests for ingredient scoring."""

from meal_planner.domain.ingredients import Category
from meal_planner.services.scoring import score_ingredient
from tests.conftest import make_ingredient

CHICKEN = make_ingredient("p1", "Chicken", Category.PROTEIN, 4.0, "mild")


def test_unused_ingredient_gets_novelty_bonus() -> None:
    assert score_ingredient(CHICKEN, {}, set()) == 2


def test_moderate_reuse_is_rewarded() -> None:
    assert score_ingredient(CHICKEN, {"p1": 1}, set()) == 10
    assert score_ingredient(CHICKEN, {"p1": 2}, set()) == 10


def test_heavy_reuse_is_penalized_progressively() -> None:
    assert score_ingredient(CHICKEN, {"p1": 3}, set()) == -5
    assert score_ingredient(CHICKEN, {"p1": 5}, set()) == -15


def test_same_week_penalty() -> None:
    assert score_ingredient(CHICKEN, {"p1": 1}, {"p1"}) == -5


def test_favorite_bonus() -> None:
    assert score_ingredient(CHICKEN, {}, set(), favorite_ids={"p1"}) == 22
    assert score_ingredient(CHICKEN, {"p1": 1}, {"p1"}, favorite_ids={"p1"}) == 15


def test_unrelated_usage_does_not_affect_score() -> None:
    assert score_ingredient(CHICKEN, {"p2": 4}, {"p2"}, favorite_ids={"p2"}) == 2
