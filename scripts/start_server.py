#!/usr/bin/env python3
# =============================================================================
# scripts/start_server.py - HTTP Server Entry Point
# =============================================================================
# Starts the Saludos server on API_HOST:API_PORT (default 0.0.0.0:3000).
#
# Usage:
#   poetry run python scripts/start_server.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --host 0.0.0.0 --port 3000
#
# Static files are served from ./public unless STATIC_DIR is set.
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.server import main


if __name__ == "__main__":
    main()
