from __future__ import annotations

import argparse

import structlog
import uvicorn

from places_api.config import get_settings
from places_api.observability.logging import configure_logging


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="User and Places API server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Root log level (e.g. INFO, DEBUG)")
    parser.add_argument("--reload", action="store_true", help="Restart the server when code changes")
    args = parser.parse_args()

    configure_logging(args.log_level)
    structlog.get_logger("server").info(
        f"Server is running on http://localhost:{args.port}",
        host=args.host,
        port=args.port,
    )

    uvicorn.run(
        "places_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
