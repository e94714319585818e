"""Ingredient catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse, Response

from meal_planner.api.dependencies import require_user_key
from meal_planner.api.models import CatalogEntriesRequest
from meal_planner.domain.serialization import catalog_to_dict
from meal_planner.services.catalog import (
    CatalogParseError,
    catalog_template_csv,
    catalog_template_xlsx,
    fallback_catalog,
    parse_catalog_csv,
    parse_catalog_xlsx,
)

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer
    from meal_planner.domain.ingredients import Catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _saved_catalog_response(
    container: AppContainer, user_key: str, catalog: Catalog
) -> dict[str, object]:
    container.library_service.save_catalog(user_key, catalog)
    return {
        "catalog": catalog_to_dict(catalog),
        "missing_categories": [c.value for c in catalog.missing_categories()],
    }


@router.get("")
async def get_catalog(
    request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Return the user's saved catalog, or the demo catalog if none is saved."""
    container: AppContainer = request.app.state.container
    catalog = container.library_service.get_catalog(user_key)
    if catalog is None:
        return {"source": "fallback", "catalog": catalog_to_dict(fallback_catalog())}
    return {"source": "saved", "catalog": catalog_to_dict(catalog)}


@router.put("")
async def put_catalog(
    body: CatalogEntriesRequest,
    request: Request,
    user_key: str = Depends(require_user_key),
) -> dict[str, object]:
    """Build a catalog from manual entries, estimating missing costs and flavors."""
    container: AppContainer = request.app.state.container
    try:
        catalog = await container.catalog_service.build_catalog(
            entry.to_entry() for entry in body.entries
        )
    except CatalogParseError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _saved_catalog_response(container, user_key, catalog)


@router.post("/csv")
async def upload_catalog_csv(
    request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Replace the user's catalog with one parsed from a CSV request body."""
    container: AppContainer = request.app.state.container
    raw = await request.body()
    try:
        catalog = parse_catalog_csv(raw.decode("utf-8"))
    except (CatalogParseError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _saved_catalog_response(container, user_key, catalog)


@router.get("/template", response_class=PlainTextResponse)
async def catalog_template() -> PlainTextResponse:
    """Return the example catalog sheet as CSV."""
    return PlainTextResponse(
        catalog_template_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=meal_planner_template.csv"},
    )


@router.post("/xlsx")
async def upload_catalog_xlsx(
    request: Request, user_key: str = Depends(require_user_key)
) -> dict[str, object]:
    """Replace the user's catalog with one parsed from an XLSX request body."""
    container: AppContainer = request.app.state.container
    try:
        catalog = parse_catalog_xlsx(await request.body())
    except CatalogParseError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return _saved_catalog_response(container, user_key, catalog)


@router.get("/template.xlsx")
async def catalog_template_workbook() -> Response:
    """Return the example catalog sheet as an XLSX workbook."""
    return Response(
        catalog_template_xlsx(),
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": "attachment; filename=meal_planner_template.xlsx"
        },
    )
