#!/usr/bin/env python3
"""Helper script to find MVG station global ids."""

import asyncio
import sys

import aiohttp

from mvg_api import Location, departures, locations


def _print_station_info(result: Location) -> None:
    """Print station information."""
    print(f"\nFound station:")
    print(f"  ID: {result.global_id}")
    print(f"  Name: {result.name}")
    print(f"  Place: {result.place}")
    print(f"  Coordinates: {result.latitude}, {result.longitude}")


def _print_sample_destinations(results: list) -> None:
    """Print sample destinations from departures."""
    print(f"\nSample destinations:")
    seen = set()
    for dep in results:
        key = (dep.label, dep.destination)
        if key not in seen:
            print(f"  {dep.label} → {dep.destination}")
            seen.add(key)


async def find_station(name: str, place: str = "München") -> None:
    """Find a station by name."""
    query = f"{name}, {place}"
    print(f"Searching for: {query}")

    async with aiohttp.ClientSession() as session:
        results = await locations(query, session=session)
        station = next((r for r in results if r.is_station and r.global_id), None)
        if station is None:
            print(f"Station not found: {query}")
            sys.exit(1)

        _print_station_info(station)

        print(f"\nFetching sample departures...")
        upcoming = await departures(station.global_id, session=session)
        if upcoming:
            _print_sample_destinations(upcoming[:10])


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python find_station.py <station_name> [place]")
        print('Example: python find_station.py "Chiemgaustraße" München')
        sys.exit(1)

    station_name = sys.argv[1]
    place = sys.argv[2] if len(sys.argv) > 2 else "München"

    asyncio.run(find_station(station_name, place))
