# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for per-request decoded input.
# These are injected into route handlers using Depends().
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import FormDecodeError
from lib.forms import parse_form

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_query(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> dict[str, Any]:
    """
    Decode the raw query string with the same rules as form bodies.

    Fields past FORM_PARAMETER_LIMIT are dropped; a malformed query
    string decodes to an empty mapping.
    """
    try:
        return parse_form(
            request.url.query,
            extended=settings.FORM_EXTENDED,
            depth=settings.FORM_DEPTH,
            parameter_limit=settings.FORM_PARAMETER_LIMIT,
            truncate=True,
        )
    except FormDecodeError as e:
        logger.debug(f"Ignoring malformed query string: {e.message}")
        return {}


def get_body(request: Request) -> dict[str, Any]:
    """Body mapping decoded by FormBodyMiddleware."""
    return getattr(request.state, "body", {})


# Type aliases for dependency injection
QueryDep = Annotated[dict[str, Any], Depends(get_query)]
BodyDep = Annotated[dict[str, Any], Depends(get_body)]
