"""Command line helper for trying out the BVG tools without an MCP host."""

import asyncio
import json
import sys
from datetime import datetime
from typing import Any

import aiohttp

from bvg_mcp.adapters.bvg_api import BvgHttpClient
from bvg_mcp.adapters.config import AppConfig
from bvg_mcp.application import ToolDispatcher
from bvg_mcp.domain.errors import BvgMcpError
from bvg_mcp.domain.models import Departure, Journey, Location, RadarResult, Stop, Trip


def _clock(when: datetime | None) -> str:
    return when.strftime("%H:%M") if when else "--:--"


def _delay_suffix(delay_seconds: int | None) -> str:
    if not delay_seconds:
        return ""
    minutes = round(delay_seconds / 60)
    return f" ({minutes:+d})" if minutes else ""


def format_duration(minutes: int) -> str:
    """Format a duration in minutes as e.g. ``"45 min"``, ``"2h"`` or ``"1h 5min"``."""
    if minutes < 60:
        return f"{minutes} min"
    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"


def format_location(location: Location) -> str:
    """One line describing a location search result."""
    name = location.name or location.address or "Unknown"
    parts = [f"{name} ({location.type})"]
    if location.id:
        parts.append(f"ID: {location.id}")
    if location.distance is not None:
        parts.append(f"{location.distance} m")
    if location.products is not None:
        modes = location.products.served_modes()
        if modes:
            parts.append(", ".join(modes))
    return " | ".join(parts)


def format_departure(departure: Departure) -> str:
    """One departure board line: time, delay, line, direction and platform."""
    line = departure.line.name if departure.line else "?"
    when = departure.when or departure.planned_when
    delay = _delay_suffix(departure.delay_seconds)
    text = f"{_clock(when)}{delay}  {line:<6} {departure.direction or ''}"
    if departure.platform:
        text += f"  [Pl. {departure.platform}]"
    if departure.is_cancelled:
        text += "  CANCELLED"
    return text


def _stop_name(stop: Stop | None) -> str:
    return stop.name if stop and stop.name else "?"


def format_journey(journey: Journey) -> list[str]:
    """Lines describing a journey, one per leg."""
    lines = []
    for leg in journey.legs:
        start = _clock(leg.departure or leg.planned_departure)
        end = _clock(leg.arrival or leg.planned_arrival)
        if leg.walking:
            mode = "walk"
        else:
            mode = leg.line.name if leg.line else "?"
        duration = leg.duration_minutes
        suffix = f" ({format_duration(duration)})" if duration is not None else ""
        lines.append(
            f"{start} {_stop_name(leg.origin)} -> {end} {_stop_name(leg.destination)}"
            f"  [{mode}]{suffix}"
        )
    if journey.price is not None:
        lines.append(f"Price: {journey.price.amount:.2f} {journey.price.currency}")
    return lines


def format_trip(trip: Trip) -> list[str]:
    line = trip.line.name if trip.line else "?"
    lines = [f"{line} -> {trip.direction or _stop_name(trip.destination)}"]
    for stopover in trip.stopovers or []:
        when = stopover.departure or stopover.planned_departure or stopover.arrival
        lines.append(f"  {_clock(when)} {_stop_name(stopover.stop)}")
    return lines


def format_radar(result: RadarResult) -> list[str]:
    lines = []
    for movement in result.movements:
        line = movement.line.name if movement.line else "?"
        lines.append(
            f"{line:<6} {movement.direction or '':<30} "
            f"{movement.latitude}, {movement.longitude}{_delay_suffix(movement.delay_seconds)}"
        )
    return lines


def _print_lines(lines: list[str], empty_message: str) -> None:
    if not lines:
        print(empty_message, file=sys.stderr)
        sys.exit(1)
    for line in lines:
        print(line)


async def _run_command(args: Any, dispatcher: ToolDispatcher) -> None:
    if args.command == "tools":
        tools = dispatcher.list_tools()
        if args.json:
            print(json.dumps(tools, indent=2, ensure_ascii=False))
        else:
            for tool in tools:
                print(f"{tool['name']}: {tool['description']}")

    elif args.command == "call":
        arguments = json.loads(args.arguments)
        result = await dispatcher.invoke(args.tool, arguments)
        print(json.dumps(result, indent=2, ensure_ascii=False))

    elif args.command == "search":
        results = await dispatcher.invoke("locations_search", {"query": args.query})
        _print_lines(
            [format_location(Location.from_api(item)) for item in results],
            f"No locations found for '{args.query}'",
        )

    elif args.command == "departures":
        results = await dispatcher.invoke(
            "stop_departures",
            {"stopId": args.stop_id, "duration": args.duration, "results": args.results},
        )
        _print_lines(
            [format_departure(Departure.from_api(item)) for item in results],
            f"No departures found for stop {args.stop_id}",
        )

    elif args.command == "journey":
        results = await dispatcher.invoke(
            "journey_plan", {"from": args.origin, "to": args.destination}
        )
        lines: list[str] = []
        for index, item in enumerate(results, 1):
            lines.append(f"Journey {index}:")
            lines.extend(f"  {line}" for line in format_journey(Journey.from_api(item)))
        _print_lines(lines, "No journeys found")

    elif args.command == "trip":
        result = await dispatcher.invoke("trip_details", {"tripId": args.trip_id})
        _print_lines(
            format_trip(Trip.from_api(result)) if result else [],
            f"Trip {args.trip_id} not found",
        )

    elif args.command == "radar":
        result = await dispatcher.invoke(
            "radar",
            {"north": args.north, "west": args.west, "south": args.south, "east": args.east},
        )
        _print_lines(format_radar(RadarResult.from_api(result)), "No vehicles in the area")


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="BVG MCP tools from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the available tools
  bvg-mcp tools

  # Call a tool with JSON arguments
  bvg-mcp call locations_nearby '{"coordinates": "52.5162,13.3777", "distance": 500}'

  # Search for a station and show its departures
  bvg-mcp search "Alexanderplatz"
  bvg-mcp departures 900100003

  # Plan a journey between two stop IDs
  bvg-mcp journey 900100003 900023201
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    tools_parser = subparsers.add_parser("tools", help="List available tools")
    tools_parser.add_argument("--json", action="store_true", help="Print discovery schemas")

    call_parser = subparsers.add_parser("call", help="Call a tool with JSON arguments")
    call_parser.add_argument("tool", help="Tool name (see 'tools')")
    call_parser.add_argument("arguments", nargs="?", default="{}", help="Arguments as JSON")

    search_parser = subparsers.add_parser("search", help="Search for stops, addresses and POIs")
    search_parser.add_argument("query", help="Search text")

    departures_parser = subparsers.add_parser("departures", help="Show departures at a stop")
    departures_parser.add_argument("stop_id", help="Stop ID (e.g., 900100003)")
    departures_parser.add_argument("--duration", type=int, default=30, help="Minutes ahead")
    departures_parser.add_argument("--results", type=int, default=15, help="Maximum results")

    journey_parser = subparsers.add_parser("journey", help="Plan a journey")
    journey_parser.add_argument("origin", help="Origin stop ID")
    journey_parser.add_argument("destination", help="Destination stop ID")

    trip_parser = subparsers.add_parser("trip", help="Show the stopovers of a trip")
    trip_parser.add_argument("trip_id", help="Trip ID from a departure")

    radar_parser = subparsers.add_parser("radar", help="Show vehicles in a bounding box")
    for bound in ("north", "west", "south", "east"):
        radar_parser.add_argument(bound, type=float, help=f"{bound.capitalize()} boundary")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()

    try:
        async with aiohttp.ClientSession() as session:
            client = BvgHttpClient(
                session,
                base_url=config.bvg_api_base_url,
                user_agent=config.bvg_api_user_agent,
            )
            await _run_command(args, ToolDispatcher(client))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (BvgMcpError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
