"""CLI helpers for configuring and checking the departure board."""

import asyncio
import json
import sys
from datetime import UTC, datetime
from typing import Any

import aiohttp

from tfl_departures.adapters.config import AppConfig, BoardConfigurationLoader
from tfl_departures.adapters.tfl_api import TflArrivalRepository
from tfl_departures.adapters.web.builders import BoardViewBuilder
from tfl_departures.adapters.web.formatters import DepartureFormatter
from tfl_departures.application.services import DepartureNormalizer, DepartureSuggestionService


async def list_platforms(station_id: str, config: AppConfig) -> dict[str, list[str]]:
    """Map each platformName currently reported at a station to its destinations."""
    async with aiohttp.ClientSession() as session:
        repo = TflArrivalRepository.from_config(session, config)
        arrivals = await repo.get_arrivals(station_id)

    platforms: dict[str, set[str]] = {}
    for arrival in arrivals:
        platform = str(arrival.get("platformName", "(none)"))
        destination = str(arrival.get("destinationName", ""))
        platforms.setdefault(platform, set())
        if destination:
            platforms[platform].add(destination.removesuffix(config.station_name_suffix))
    return {platform: sorted(dests) for platform, dests in sorted(platforms.items())}


async def build_board(config: AppConfig, now: datetime | None = None) -> dict[str, Any]:
    """Run a single poll against the configured stations and build the board data."""
    board_config = BoardConfigurationLoader.load(config)
    first, second = board_config.stations

    async with aiohttp.ClientSession() as session:
        repo = TflArrivalRepository.from_config(session, config)
        first_results, second_results = await asyncio.gather(
            repo.get_arrivals(first.station_id),
            repo.get_arrivals(second.station_id),
        )

    departures = DepartureNormalizer(board_config).normalize(first_results, second_results)
    builder = BoardViewBuilder(
        DepartureSuggestionService(board_config), DepartureFormatter(config)
    )
    return builder.build(departures, now or datetime.now(UTC))


def print_board(board: dict[str, Any]) -> None:
    """Print board data as plain text."""
    print(f"\n{board['suggestion_headline']}")
    if board["suggestion_detail"]:
        print(f"  {board['suggestion_detail']}")
    print()
    if not board["has_departures"]:
        print(f"  {board['no_departures_message']}")
        return
    for row in board["rows"]:
        print(
            f"  {row['origin']:<14} {row['destination']:<24} "
            f"{row['countdown']:>9}  {row['status']}"
        )


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Departure board tools for two adjacent TfL stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s platforms 940GZZLUWSD      List platform labels at Wanstead
  %(prog)s board                      Show the board once for the configured stations
  %(prog)s board --json               Same, as JSON
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    platforms_parser = subparsers.add_parser(
        "platforms", help="List platform labels (direction filters) at a station"
    )
    platforms_parser.add_argument("station_id", help="StopPoint id (e.g., 940GZZLUWSD)")
    platforms_parser.add_argument("--json", action="store_true", help="Output as JSON")

    board_parser = subparsers.add_parser("board", help="Poll once and print the board")
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "platforms":
            platforms = await list_platforms(args.station_id, config)
            if args.json:
                print(json.dumps(platforms, indent=2, ensure_ascii=False))
            else:
                if not platforms:
                    print(f"No arrivals reported at {args.station_id}", file=sys.stderr)
                    sys.exit(1)
                print(f"\nPlatforms at {args.station_id}:\n")
                for platform, destinations in platforms.items():
                    print(f"  {platform}")
                    for destination in destinations:
                        print(f"    -> {destination}")

        elif args.command == "board":
            board = await build_board(config)
            if args.json:
                print(json.dumps(board, indent=2, ensure_ascii=False))
            else:
                print_board(board)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
