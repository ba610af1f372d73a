"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from nutrilog.api.dashboard import router as dashboard_router
from nutrilog.api.diary import router as diary_router
from nutrilog.api.products import router as products_router
from nutrilog.api.profile import router as profile_router
from nutrilog.api.workouts import router as workouts_router
from nutrilog.app_logging import configure_logging
from nutrilog.containers import AppContainer
from nutrilog.errors import NutrilogError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="nutrilog")
    app.state.container = container

    app.include_router(diary_router)
    app.include_router(products_router)
    app.include_router(profile_router)
    app.include_router(workouts_router)
    app.include_router(dashboard_router)

    @app.exception_handler(NutrilogError)
    async def handle_domain_error(request: Request, exc: NutrilogError) -> JSONResponse:
        logger.info(
            "Request failed: %s %s -> %s %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": _validation_message(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _validation_message(exc: RequestValidationError) -> str:
    """Summarise pydantic errors as ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request"
