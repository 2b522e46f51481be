import argparse
import json
import logging
import sys

from .src.models import OutcomeReason, SearchOptions
from .src.services.genius_service import GeniusSearchService


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="songfinder", description="Search songs on Genius")
    parser.add_argument("query", help="Search text (e.g. \"Bohemian Rhapsody\")")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of songs to return")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    outcome = GeniusSearchService().search_songs(args.query, SearchOptions(limit=args.limit))
    if outcome.failed:
        print("Search failed, see log for details", file=sys.stderr)
        return 1
    if outcome.reason is OutcomeReason.NO_LIMIT:
        print("No --limit given: showing every result", file=sys.stderr)

    print(json.dumps([song.to_dict() for song in outcome.results], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
