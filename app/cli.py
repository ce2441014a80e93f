"""
Command-line entry point for the User Management API.

Usage:
    usercrud serve [--host HOST] [--port PORT]
    usercrud init-db
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=False)


def cmd_init_db(_args: argparse.Namespace) -> None:
    """Create the user table without starting the server."""
    from app.infrastructure.database import get_engine, init_database

    init_database(get_engine())


def main() -> None:
    parser = argparse.ArgumentParser(description="User Management API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create the user table")
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args()
    configure_logging(level=settings.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
