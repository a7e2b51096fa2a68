"""Command line interface for querying the MVG API."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from mvg_api.adapters.config import AppConfig
from mvg_api.adapters.http import AiohttpTransport
from mvg_api.adapters.mvg_api import MvgApiClient
from mvg_api.domain.exceptions import MvgApiError
from mvg_api.domain.models import ApiModel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``mvg-api`` command."""
    parser = argparse.ArgumentParser(
        prog="mvg-api",
        description="Query the unofficial MVG API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for locations
  mvg-api locations "Starnberg Nord"

  # Upcoming departures at Karlsplatz (Stachus)
  mvg-api departures de:09162:1

  # Locations near Marienplatz
  mvg-api nearby 48.138611 11.573889
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--limit", type=int, default=None, help="Print at most N results")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    locations_parser = subparsers.add_parser(
        "locations", parents=[common], help="Search locations by name"
    )
    locations_parser.add_argument("query", help="Free-text search query")

    departures_parser = subparsers.add_parser(
        "departures", parents=[common], help="Show upcoming departures"
    )
    departures_parser.add_argument("global_id", help="Station global id (e.g., de:09162:1)")

    nearby_parser = subparsers.add_parser(
        "nearby", parents=[common], help="Find locations near coordinates"
    )
    nearby_parser.add_argument("latitude", type=float, help="Latitude (WGS84 degrees)")
    nearby_parser.add_argument("longitude", type=float, help="Longitude (WGS84 degrees)")

    subparsers.add_parser("stations", parents=[common], help="List all stations")
    subparsers.add_parser("station-ids", parents=[common], help="List all station global ids")
    subparsers.add_parser("lines", parents=[common], help="List all lines")

    return parser


async def run_command(args: argparse.Namespace, client: MvgApiClient) -> list[Any]:
    """Dispatch a parsed command to the client."""
    if args.command == "locations":
        return await client.locations(args.query)
    if args.command == "departures":
        return await client.departures(args.global_id)
    if args.command == "nearby":
        return await client.nearby_locations(args.latitude, args.longitude)
    if args.command == "stations":
        return await client.stations()
    if args.command == "station-ids":
        return await client.station_global_ids()
    if args.command == "lines":
        return await client.lines()
    raise ValueError(f"Unknown command: {args.command}")


def to_json(results: list[Any], limit: int | None = None) -> str:
    """Render results as JSON using the upstream field names."""
    if limit is not None:
        results = results[:limit]
    payload = [
        item.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(item, ApiModel)
        else item
        for item in results
    ]
    return json.dumps(payload, indent=2, ensure_ascii=False)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    try:
        async with aiohttp.ClientSession() as session:
            client = MvgApiClient(AiohttpTransport(session, config))
            results = await run_command(args, client)
    except (MvgApiError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(to_json(results, args.limit))
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
