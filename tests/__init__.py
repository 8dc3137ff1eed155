# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Saludos server:
# - test_forms.py: Unit tests for form decoding and value rendering
# - test_middleware.py: Tests for the body decoding middleware
# - test_echo.py: Integration tests for the echo endpoints
# - test_static.py: Integration tests for static file serving
# - test_config.py: Settings defaults and validation
# - test_server.py: uvicorn entry point wiring
#
# Run tests with: poetry run pytest
# =============================================================================
