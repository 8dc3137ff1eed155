# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the Saludos application: static assets ahead of everything, then
# form-decoding middleware, exception handlers, and the echo routes.
#
# Usage:
#   poetry run uvicorn app.main:app --port 3000
#   poetry run python scripts/start_server.py
# =============================================================================

import logging

from fastapi import FastAPI

from app.config import Settings, settings
from app.exceptions import (
    SaludosException,
    method_not_allowed_handler,
    saludos_exception_handler,
    unexpected_exception_handler,
)
from app.middleware import FormBodyMiddleware, StaticAssetMiddleware
from app.routers import echo

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(app_settings: Settings) -> FastAPI:
    """
    Build the application object.

    Order matters: middleware added last runs first, so the static responder
    is added after the body decoder. A file under STATIC_DIR wins over a
    route with the same path; anything not on disk falls through to routing.
    """
    app = FastAPI(
        title="Saludos",
        description="Static files plus two echo endpoints.",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = app_settings

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # Every request body is decoded, whatever its route
    app.add_middleware(FormBodyMiddleware, settings=app_settings)

    static_dir = app_settings.STATIC_DIR
    if static_dir.is_dir():
        app.add_middleware(StaticAssetMiddleware, directory=static_dir)
    else:
        logger.warning(f"Static directory not found, serving routes only: {static_dir}")

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(SaludosException, saludos_exception_handler)
    app.add_exception_handler(405, method_not_allowed_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(echo.router, tags=["Echo"])

    return app


# Module-level app for `uvicorn app.main:app`
app = create_app(settings)
