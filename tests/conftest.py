# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds an isolated app per test around a temporary static directory
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def static_dir(tmp_path):
    """Temporary static root with a page, a stylesheet, and a binary file."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>Saludos</h1>\n", encoding="utf-8")
    (root / "styles.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (root / "img").mkdir()
    (root / "img" / "pixel.bin").write_bytes(bytes(range(256)))
    return root


@pytest.fixture
def test_settings(static_dir):
    """Settings pointing at the temporary static root."""
    return Settings(STATIC_DIR=static_dir, API_PORT=3000)


@pytest.fixture
def app(test_settings):
    """Fresh application built from test_settings."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Synchronous test client for the app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def post_raw(client):
    """POST a raw body with an explicit content type."""
    def _post(path, body, content_type="application/x-www-form-urlencoded"):
        return client.post(path, content=body, headers={"content-type": content_type})
    return _post
