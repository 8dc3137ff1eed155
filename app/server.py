# =============================================================================
# app/server.py - Process Entry Point
# =============================================================================
# Runs an application object under uvicorn and announces the bound port once
# the listening sockets are open.
#
# Usage:
#   poetry run saludos-server
#   poetry run python scripts/start_server.py
# =============================================================================

import logging
import socket

import uvicorn
from fastapi import FastAPI

from app.config import Settings

logger = logging.getLogger(__name__)


class AnnouncingServer(uvicorn.Server):
    """uvicorn server that logs one line after its sockets are bound."""

    def __init__(self, config: uvicorn.Config, port: int):
        super().__init__(config)
        self.port = port

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Servidor escuchando en el puerto {self.port}")


def build_server(app: FastAPI, settings: Settings) -> AnnouncingServer:
    """Configure (but don't start) the server for `app`."""
    config = uvicorn.Config(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=logging.getLevelName(settings.log_level).lower(),
    )
    return AnnouncingServer(config, port=settings.API_PORT)


def serve(app: FastAPI, settings: Settings) -> None:
    """Serve `app` until the process is interrupted."""
    build_server(app, settings).run()


def main() -> None:
    """Serve the default application with the global settings."""
    from app.main import app
    from app.config import settings

    serve(app, settings)
