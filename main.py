"""
main.py
-------
Command-line entry point for querying listings.

Responsibilities:
    - Initialize the database connection pool.
    - Run one listing request through the ListingService.
    - Print the wire payload as JSON and close the pool.

Examples:
    python main.py games --region JPN --filter title --keyword dragon --sort updt --direction desc --count 20
    python main.py contests --region USA
    python main.py exists 1042 --region JPN
"""

import argparse
import json
import sys

from db.connection import ConnectionPool
from db.errors import ListingError
from repositories.listing_repo import ListingRepository
from services.listing_service import InvalidParameterError, ListingService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query game and contest listings.")
    sub = parser.add_subparsers(dest="command", required=True)

    games = sub.add_parser("games", help="List games")
    games.add_argument("--region", default="")
    games.add_argument("--filter", default="")
    games.add_argument("--keyword", default="")
    games.add_argument("--sort", default="")
    games.add_argument("--direction", default="")
    games.add_argument("--contest", default="")
    games.add_argument("--award", default="")
    games.add_argument("--famer", default="")
    games.add_argument("--count", default="")
    games.add_argument("--offset", default="")

    contests = sub.add_parser("contests", help="List contests")
    contests.add_argument("--region", default="")

    exists = sub.add_parser("exists", help="Check whether a game id exists")
    exists.add_argument("sid")
    exists.add_argument("--region", default="")
    return parser


def run(service: ListingService, args: argparse.Namespace):
    """Dispatch a parsed command to the service and return its payload."""
    if args.command == "games":
        params = {k: v for k, v in vars(args).items() if k != "command"}
        return service.list_games(params)
    if args.command == "contests":
        return service.list_contests(args.region)
    return {"exists": service.game_exists(args.sid, args.region)}


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the query and print JSON."""
    args = build_parser().parse_args(argv)

    pool = ConnectionPool()
    try:
        pool.open()
        service = ListingService(ListingRepository(pool))
        payload = run(service, args)
    except InvalidParameterError as e:
        logger.error(f"Invalid request: {e}")
        return 2
    except ListingError as e:
        logger.error(f"Listing query failed: {e}")
        return 1
    finally:
        pool.close()

    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
