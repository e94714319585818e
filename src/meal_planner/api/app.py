"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from meal_planner.api.catalog import router as catalog_router
from meal_planner.api.plans import router as plans_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer
from meal_planner.services.library import StorageError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(plans_router)
    app.include_router(catalog_router)

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.exception("Storage operation failed", extra={"path": request.url.path})
        detail = "Storage operation failed."
        if container.settings.environment == "local":
            detail = f"{detail} (debug: {type(exc).__name__}: {exc})"
        return JSONResponse(status_code=502, content={"detail": detail})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
