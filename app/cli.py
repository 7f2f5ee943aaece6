"""
CLI entry point for the trader accounts service.

Usage:
    # Create the account tables on the configured database
    python -m app.cli init-db

    # Serve the HTTP API
    python -m app.cli serve --port 8000
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create missing tables on the configured database."""
    from app.infrastructure.accounts.database import build_engine
    from app.infrastructure.accounts.schema import create_schema

    engine = build_engine(args.database_url or settings.database_url)
    try:
        create_schema(engine)
    finally:
        engine.dispose()


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Trader Accounts service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the account tables")
    init_parser.add_argument(
        "--database-url", default=None,
        help="SQLAlchemy URL overriding DATABASE_URL",
    )
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main() -> None:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
