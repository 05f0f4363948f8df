"""Run venue and option queries against a JSON snapshot from the shell.

Usage::

    python -m src.cli venues --area "Dubai Marina" --genre Techno
    python -m src.cli venues --snapshot data/snapshot.json --date "17 Sept 25"
    python -m src.cli options --vibe Party --date-format short

Output is JSON on stdout.  Logs go to stderr at WARNING unless
``--verbose`` is given, so the output can be piped into ``jq``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any

from src.config.settings import Settings
from src.models.filters import FilterState
from src.providers.record_source.json_file_provider import JsonFileRecordSource
from src.services.facet_engine import FacetEngine
from src.services.snapshot_service import SnapshotService
from src.utils.date_canonicalizer import DateFormat
from src.utils.errors import SnapshotUnavailableError
from src.utils.logging import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser with ``venues`` and ``options`` subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--snapshot",
        default=None,
        help="JSON snapshot file (default: SNAPSHOT_PATH setting)",
    )
    common.add_argument("--area", action="append", default=[], help="Area (repeatable)")
    common.add_argument("--vibe", action="append", default=[], help="Vibe tag (repeatable)")
    common.add_argument(
        "--date", action="append", default=[], help='Date, e.g. "17/September/2025" (repeatable)'
    )
    common.add_argument("--genre", action="append", default=[], help="Genre tag (repeatable)")
    common.add_argument(
        "--date-format",
        dest="date_format",
        choices=[fmt.value for fmt in DateFormat],
        default=None,
        help="Format of the date options (default: DEFAULT_DATE_FORMAT setting)",
    )
    common.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    common.add_argument("--verbose", action="store_true", help="Log at INFO to stderr")

    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Query the vibeMap facet engine over a JSON snapshot.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Query commands")

    venues_parser = subparsers.add_parser(
        "venues", parents=[common], help="List matching venues (deduplicated)"
    )
    venues_parser.add_argument("--search", default="", help="Free-text search on name/category")

    subparsers.add_parser(
        "options", parents=[common], help="List the selectable values of every facet"
    )
    return parser


def _filter_state(args: argparse.Namespace, app_settings: Settings) -> FilterState:
    return FilterState(
        selected_areas=args.area,
        active_vibes=args.vibe,
        active_dates=args.date,
        active_genres=args.genre,
        search_query=getattr(args, "search", ""),
        date_format=DateFormat(args.date_format or app_settings.default_date_format),
    )


def _venues_payload(engine: FacetEngine, state: FilterState) -> dict[str, Any]:
    result = engine.query(state)
    return {
        "count": len(result.venues),
        "matched_rows": result.total_before_dedup,
        "data": [venue.display_payload() for venue in result.venues],
    }


async def _load_engine(path: str, timeout: float) -> FacetEngine:
    service = SnapshotService(JsonFileRecordSource(path), timeout_seconds=timeout)
    await service.refresh()
    return service.engine()


def run(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, run the query and print JSON.  Returns the exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 1

    configure_logging(log_level="INFO" if args.verbose else "WARNING", stream=sys.stderr)
    app_settings = Settings()
    snapshot_path = args.snapshot or app_settings.snapshot_path

    try:
        engine = asyncio.run(
            _load_engine(snapshot_path, app_settings.snapshot_timeout_seconds)
        )
    except SnapshotUnavailableError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    state = _filter_state(args, app_settings)
    if args.command == "venues":
        payload: dict[str, Any] = _venues_payload(engine, state)
    else:
        payload = engine.filter_options(state).model_dump()

    print(json.dumps(payload, indent=args.indent or None, ensure_ascii=False))
    return 0


def main() -> None:
    """CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
