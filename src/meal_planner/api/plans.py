"""Plan generation, library and favorites endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from meal_planner.api.dependencies import require_user_key
from meal_planner.api.models import (
    GeneratePlanRequest,
    MealPayload,
    SavePlanRequest,
    WeeklyPlanPayload,
)
from meal_planner.config import parse_budget
from meal_planner.domain.ingredients import EmptyCategoryError
from meal_planner.domain.serialization import (
    meal_to_dict,
    plan_to_dict,
    saved_plan_to_dict,
    shopping_list_to_dict,
)
from meal_planner.services.planner import BudgetDefault
from meal_planner.services.shopping import build_shopping_list

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(tags=["plans"])
_logger = logging.getLogger(__name__)


@router.post("/plans/generate")
async def generate_plan(
    body: GeneratePlanRequest,
    request: Request,
    user_key: str = Depends(require_user_key),
) -> dict[str, object]:
    """Generate a new multi-week plan."""
    container: AppContainer = request.app.state.container
    try:
        plan = container.meal_plan_service.generate(
            user_key,
            catalog=body.catalog.to_domain() if body.catalog else None,
            weeks_count=body.weeks_count,
            meals_per_week=body.meals_per_week,
            budget_per_week=(
                parse_budget(body.budget_per_week)
                if "budget_per_week" in body.model_fields_set
                else BudgetDefault.CONFIGURED
            ),
            use_favorites=body.use_favorites,
        )
    except EmptyCategoryError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return plan_to_dict(plan)


@router.post("/plans/shopping-list")
async def week_shopping_list(body: WeeklyPlanPayload) -> dict[str, object]:
    """Build the shopping list for a posted week."""
    return shopping_list_to_dict(build_shopping_list(body.to_domain()))


@router.post("/plans/saved")
async def save_plan(
    body: SavePlanRequest,
    request: Request,
    user_key: str = Depends(require_user_key),
) -> dict[str, object]:
    """Store a plan in the user's library."""
    container: AppContainer = request.app.state.container
    saved = container.library_service.save_plan(
        user_key, body.plan.to_domain(), body.name
    )
    return saved_plan_to_dict(saved)


@router.get("/plans/saved")
async def list_saved_plans(
    request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Return the user's saved plans."""
    container: AppContainer = request.app.state.container
    plans = container.library_service.list_plans(user_key)
    return {"plans": [saved_plan_to_dict(saved) for saved in plans]}


@router.get("/plans/saved/{saved_id}")
async def get_saved_plan(
    saved_id: str, request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Return one saved plan."""
    container: AppContainer = request.app.state.container
    saved = container.library_service.get_plan(user_key, saved_id)
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return saved_plan_to_dict(saved)


@router.delete("/plans/saved/{saved_id}")
async def delete_saved_plan(
    saved_id: str, request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, str]:
    """Delete a saved plan."""
    container: AppContainer = request.app.state.container
    container.library_service.delete_plan(user_key, saved_id)
    return {"status": "ok"}


@router.get("/plans/saved/{saved_id}/shopping-list")
async def saved_plan_shopping_list(
    saved_id: str,
    request: Request,
    week: int | None = None,
    user_key: str = Depends(require_user_key),
) -> dict[str, object]:
    """Return a saved plan's shopping list for one week or for all weeks."""
    container: AppContainer = request.app.state.container
    shopping_list = container.meal_plan_service.shopping_list(
        user_key, saved_id, week_number=week
    )
    if shopping_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return shopping_list_to_dict(shopping_list)


@router.get("/favorites")
async def list_favorites(
    request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Return the user's favorite recipes."""
    container: AppContainer = request.app.state.container
    favorites = container.library_service.list_favorites(user_key)
    return {"favorites": [meal_to_dict(meal) for meal in favorites]}


@router.post("/favorites")
async def add_favorite(
    body: MealPayload, request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Mark a meal as favorite."""
    container: AppContainer = request.app.state.container
    favorites = container.library_service.add_favorite(user_key, body.to_domain())
    _logger.info("Favorite added: user_key=%s meal_id=%s", user_key, body.id)
    return {"favorites": [meal_to_dict(meal) for meal in favorites]}


@router.delete("/favorites/{meal_id}")
async def remove_favorite(
    meal_id: str, request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, str]:
    """Remove a favorite recipe."""
    container: AppContainer = request.app.state.container
    container.library_service.remove_favorite(user_key, meal_id)
    return {"status": "ok"}
