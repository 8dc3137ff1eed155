# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web application:
# - main.py: create_app() factory, middleware, error handlers
# - config.py: Environment variable loading and settings
# - middleware.py: Static assets ahead of routing, global urlencoded body decoding
# - dependencies.py: Per-request decoded query and body mappings
# - routers/: Endpoint definitions
# - server.py: uvicorn entry point
#
# The app layer is thin - decoding lives in the lib/ package.
# =============================================================================
