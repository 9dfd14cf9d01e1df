"""Management commands: create tables, seed demo rows, list items, run the API."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError

from portfolio_showcase.config import configure_logging
from portfolio_showcase.data.db import init_db
from portfolio_showcase.data.seed import seed_portfolio_items
from portfolio_showcase.services.portfolio import PortfolioQueryError, list_portfolio_items


def _cmd_init_db(args: argparse.Namespace) -> int:
    init_db()
    print("Database tables created.")
    return 0


def _cmd_seed(args: argparse.Namespace) -> int:
    init_db()
    inserted = seed_portfolio_items(skip_if_populated=args.skip_if_populated)
    print(f"Inserted {inserted} portfolio item(s).")
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    items = list_portfolio_items()
    print(json.dumps(items, indent=2))
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    from portfolio_showcase.api.main import main as run_server

    run_server(host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-showcase",
        description="Manage the portfolio showcase database and API.",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create the database tables")
    init_parser.set_defaults(handler=_cmd_init_db)

    seed_parser = subparsers.add_parser(
        "seed",
        help="Insert the demo portfolio items (duplicates accumulate unless --skip-if-populated)",
    )
    seed_parser.add_argument(
        "--skip-if-populated",
        action="store_true",
        help="Only seed when the table is empty",
    )
    seed_parser.set_defaults(handler=_cmd_seed)

    list_parser = subparsers.add_parser("list", help="Print the portfolio items as JSON")
    list_parser.set_defaults(handler=_cmd_list)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument(
        "--host", default=None, help="Bind address (default: HOST or 0.0.0.0)"
    )
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: PORT or 5000)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve_parser.set_defaults(handler=_cmd_serve)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 for success, 1 for a database or seed-data error).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.handler(args)
    except (SQLAlchemyError, PortfolioQueryError) as exc:
        print(f"Database error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
