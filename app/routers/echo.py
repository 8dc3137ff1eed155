# =============================================================================
# app/routers/echo.py - Echo Endpoints
# =============================================================================
# Two handlers that format one input value into a fixed text template.
# A value that was not sent renders as "undefined"; neither route validates
# input or answers with anything but 200.
# =============================================================================

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.dependencies import BodyDep, QueryDep
from lib.forms import render_value

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route(
    "/query_parameters",
    methods=["GET", "HEAD"],
    response_class=PlainTextResponse,
)
async def query_parameters(query: QueryDep):
    """
    Greet the `clave` query parameter. HEAD requests run the same handler.

    GET /query_parameters?clave=Ana -> "Hola, Ana!"
    """
    clave = render_value(query.get("clave"))
    logger.info(clave)
    return f"Hola, {clave}!"


@router.post("/enviar", response_class=PlainTextResponse)
async def enviar(body: BodyDep):
    """
    Acknowledge the `mensaje` form field.

    POST /enviar (mensaje=hola) -> "Mensaje recibido: hola"
    """
    mensaje = render_value(body.get("mensaje"))
    return f"Mensaje recibido: {mensaje}"
