"""FastAPI application factory and local runner for the menu API."""
from __future__ import annotations

import os
import random

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from menu_api.core.config import Settings, get_settings
from menu_api.core.logging import configure_logging
from menu_api.repositories import MenuRepository, build_repository
from menu_api.routers import menu as menu_router
from menu_api.routers import pages as pages_router
from menu_api.services.menu_service import MenuService

BASE = os.path.dirname(__file__)
logger = structlog.get_logger(__name__)


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(
    settings: Settings | None = None,
    repository: MenuRepository | None = None,
    rng: random.Random | None = None,
) -> FastAPI:
    """Build the application; ``repository`` overrides the configured backend."""
    settings = settings or get_settings()
    repository = repository or build_repository(settings)

    app = FastAPI(title="QuickBite API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request)
    app.add_exception_handler(Exception, _unhandled_error)

    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=os.path.join(BASE, "templates"))
    app.state.menu_service = MenuService(repository, specials_count=settings.specials_count, rng=rng)

    app.include_router(pages_router.router)
    app.include_router(menu_router.router)
    return app


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.is_production:
        logger.info("local_runner_disabled", app_env=settings.app_env)
        return
    app = create_app(settings)
    logger.info("server_starting", url=f"http://localhost:{settings.port}", storage=settings.storage_backend)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
