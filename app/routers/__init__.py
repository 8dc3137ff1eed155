# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - echo.py: Query and form echo endpoints
#
# Each router is included in main.py; static files are checked before routing.
# =============================================================================

from . import echo

__all__ = [
    "echo",
]
