#!/usr/bin/env python3
"""
Vehicle Registry API -- process entry point.

Starts a long-lived HTTP listener serving asgi:app. There are no other
subcommands; everything else is configured through environment variables
(see core/config.py).

Usage:
  python main.py
  python main.py --port 8080
  python main.py --host 127.0.0.1 --reload

Environment variables:
  JWT_KEY       Signing key for access tokens (>= 32 chars). Required outside DEBUG.
  DATABASE_URL  SQLAlchemy URL. Defaults to a SQLite file next to the code.
  DEBUG         true -> auto-generated JWT_KEY for local development.
"""

import argparse

import uvicorn

from core.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Vehicle Registry API -- administrators and vehicles behind JWT auth.",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
