#!/usr/bin/env python
"""
Run the Shop API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode

JWT_SECRET must be set (environment or .env); the server refuses to start
without it.
"""

import argparse
import sys

import uvicorn
from pydantic import ValidationError

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run Shop API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(1)

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
