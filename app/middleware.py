# =============================================================================
# app/middleware.py - Static Asset and Body Decoding Middleware
# =============================================================================
# Two global ASGI middlewares, outermost first:
#
# - StaticAssetMiddleware: GET/HEAD requests naming an existing file under the
#   static root are answered from disk; everything else falls through.
# - FormBodyMiddleware: decodes urlencoded request bodies onto
#   `request.state.body`. It is always a dict: absent, non-form, malformed, or
#   oversized bodies all decode to {}. Non-form bodies are never read here.
# =============================================================================

import logging
import os
import stat
from pathlib import Path
from typing import Any

import anyio.to_thread
from starlette.datastructures import Headers
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.config import Settings
from app.exceptions import FormDecodeError
from lib.forms import FORM_CONTENT_TYPE, parse_form

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def _parse_content_type(value: str) -> tuple[str, dict[str, str]]:
    """Split "type/subtype; key=value" into its media type and parameters."""
    media_type, _, rest = value.partition(";")
    params: dict[str, str] = {}
    for item in rest.split(";"):
        name, sep, param = item.partition("=")
        if sep:
            params[name.strip().lower()] = param.strip().strip('"')
    return media_type.strip().lower(), params


# =============================================================================
# Static Assets
# =============================================================================

class StaticAssetMiddleware:
    """
    Serve files from `directory` ahead of the application's routes.

    Only paths that resolve to a regular file (or a directory holding an
    index.html) are served; the rest go to the wrapped app unchanged.

    Usage:
        app.add_middleware(StaticAssetMiddleware, directory=settings.STATIC_DIR)
    """

    def __init__(self, app: ASGIApp, directory: Path):
        self.app = app
        self.files = StaticFiles(directory=directory, html=True)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] == "http"
            and scope["method"] in ("GET", "HEAD")
            and await self.has_asset(scope)
        ):
            await self.files(scope, receive, send)
            return
        await self.app(scope, receive, send)

    async def has_asset(self, scope: Scope) -> bool:
        """Whether the request path names something servable on disk."""
        path = self.files.get_path(scope)
        _, stat_result = await anyio.to_thread.run_sync(self.files.lookup_path, path)
        if stat_result is None:
            return False
        if stat.S_ISREG(stat_result.st_mode):
            return True
        if not stat.S_ISDIR(stat_result.st_mode):
            return False

        index_path = os.path.join(path, INDEX_FILE)
        _, index_stat = await anyio.to_thread.run_sync(self.files.lookup_path, index_path)
        return index_stat is not None and stat.S_ISREG(index_stat.st_mode)


# =============================================================================
# Form Bodies
# =============================================================================

class FormBodyMiddleware:
    """
    Decode application/x-www-form-urlencoded bodies for every HTTP request.

    Usage:
        app.add_middleware(FormBodyMiddleware, settings=settings)
    """

    def __init__(self, app: ASGIApp, settings: Settings):
        self.app = app
        self.settings = settings

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        state = scope.setdefault("state", {})
        state["body"] = {}

        headers = Headers(scope=scope)
        media_type, params = _parse_content_type(headers.get("content-type", ""))
        if media_type != FORM_CONTENT_TYPE or self._declared_too_large(headers):
            await self.app(scope, receive, send)
            return

        limit = self.settings.MAX_BODY_BYTES
        body, more_body, disconnect = await self._read_body(receive, limit)
        if more_body or len(body) > limit:
            logger.warning(f"Form body exceeds limit of {limit} bytes; not decoded")
        else:
            state["body"] = self.decode(body, params.get("charset", "utf-8"))

        pending: list[Message] = [
            {"type": "http.request", "body": body, "more_body": more_body}
        ]
        if disconnect is not None:
            pending.append(disconnect)

        async def replay() -> Message:
            if pending:
                return pending.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    def _declared_too_large(self, headers: Headers) -> bool:
        declared = headers.get("content-length", "")
        if not declared.isdigit() or int(declared) <= self.settings.MAX_BODY_BYTES:
            return False
        logger.warning(
            f"Form body of {declared} bytes exceeds limit of "
            f"{self.settings.MAX_BODY_BYTES}; not decoded"
        )
        return True

    @staticmethod
    async def _read_body(
        receive: Receive, limit: int
    ) -> tuple[bytes, bool, Message | None]:
        """
        Read the request body, stopping once more than `limit` bytes arrived.

        Returns the bytes read, whether the client has more to send, and the
        disconnect message if the client went away mid-body.
        """
        chunks: list[bytes] = []
        size = 0
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                return b"".join(chunks), False, message
            chunk = message.get("body", b"")
            chunks.append(chunk)
            size += len(chunk)
            more_body = message.get("more_body", False)
            if not more_body or size > limit:
                return b"".join(chunks), more_body, None

    def decode(self, body: bytes, charset: str = "utf-8") -> dict[str, Any]:
        """Best-effort decode of a complete form body; never raises."""
        if not body:
            return {}

        try:
            return parse_form(
                body,
                extended=self.settings.FORM_EXTENDED,
                depth=self.settings.FORM_DEPTH,
                parameter_limit=self.settings.FORM_PARAMETER_LIMIT,
                encoding=charset,
            )
        except FormDecodeError as e:
            logger.debug(f"Ignoring malformed form body: {e.message}")
            return {}
