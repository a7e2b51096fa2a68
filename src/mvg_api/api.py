"""Public async functions for the MVG API.

Each function performs one request. Pass ``session`` to reuse an aiohttp
session, or ``transport`` to route the request through any ``HttpTransport``.
Without either, a session is opened for the call and closed afterwards.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import aiohttp

from mvg_api.adapters.http import AiohttpTransport
from mvg_api.adapters.mvg_api import MvgApiClient
from mvg_api.domain.models import Departure, Line, Location, Station, StationGlobalId

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from mvg_api.domain.ports import HttpTransport


@asynccontextmanager
async def _client(
    session: "ClientSession | None", transport: "HttpTransport | None"
) -> AsyncIterator[MvgApiClient]:
    if transport is not None:
        yield MvgApiClient(transport)
    elif session is not None:
        yield MvgApiClient(AiohttpTransport(session))
    else:
        async with aiohttp.ClientSession() as own_session:
            yield MvgApiClient(AiohttpTransport(own_session))


async def locations(
    query: str,
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[Location]:
    """Find locations using a query string.

    Returns a list of locations, where the first element is the best match.
    """
    async with _client(session, transport) as client:
        return await client.locations(query)


async def departures(
    global_id: StationGlobalId,
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[Departure]:
    """Retrieve upcoming departures for a station global id such as ``de:09162:1``."""
    async with _client(session, transport) as client:
        return await client.departures(global_id)


async def nearby_locations(
    latitude: float,
    longitude: float,
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[Location]:
    """Find locations near the given coordinates, nearest first."""
    async with _client(session, transport) as client:
        return await client.nearby_locations(latitude, longitude)


async def stations(
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[Station]:
    """Retrieve a list of all stations."""
    async with _client(session, transport) as client:
        return await client.stations()


async def station_global_ids(
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[StationGlobalId]:
    """Retrieve a list of all station global ids."""
    async with _client(session, transport) as client:
        return await client.station_global_ids()


async def lines(
    *,
    session: "ClientSession | None" = None,
    transport: "HttpTransport | None" = None,
) -> list[Line]:
    """Retrieve a list of all lines."""
    async with _client(session, transport) as client:
        return await client.lines()
