"""MVG API client: executes catalog endpoints through a transport."""

import logging
from typing import Any

from mvg_api.adapters.mvg_api.decoder import decode
from mvg_api.adapters.mvg_api.endpoints import (
    DEPARTURES,
    LINES,
    LOCATIONS,
    NEARBY_LOCATIONS,
    STATION_GLOBAL_IDS,
    STATIONS,
    Endpoint,
)
from mvg_api.domain.exceptions import TransportError
from mvg_api.domain.models import Departure, Line, Location, Station, StationGlobalId
from mvg_api.domain.ports import HttpTransport

logger = logging.getLogger(__name__)


class MvgApiClient:
    """Client for the unofficial MVG API.

    Every method performs exactly one request. Transport failures raise
    ``TransportError`` and undecodable bodies raise ``DecodeError``; neither
    is retried.
    """

    def __init__(self, transport: HttpTransport) -> None:
        """Initialize with the transport used to reach upstream."""
        self._transport = transport

    async def execute(self, endpoint: Endpoint, **params: Any) -> Any:
        """Send the request for ``endpoint`` and decode its response."""
        request = endpoint.build_request(**params)
        response = await self._transport.send(request)
        if not 200 <= response.status < 300:
            raise TransportError(
                f"MVG API returned status {response.status} for {request.url}",
                url=request.url,
                status=response.status,
            )
        result = decode(response.body, endpoint.result_type, url=request.url)
        logger.debug(f"{endpoint.name}: decoded {len(result)} item(s)")
        return result

    async def locations(self, query: str) -> list[Location]:
        """Find locations matching a free-text query, best match first."""
        return await self.execute(LOCATIONS, query=query)

    async def departures(self, global_id: StationGlobalId) -> list[Departure]:
        """Get upcoming departures for a station global id."""
        if not global_id:
            raise ValueError("global_id must be a non-empty string")
        return await self.execute(DEPARTURES, global_id=global_id)

    async def nearby_locations(self, latitude: float, longitude: float) -> list[Location]:
        """Find locations near WGS84 coordinates, nearest first."""
        return await self.execute(NEARBY_LOCATIONS, latitude=latitude, longitude=longitude)

    async def stations(self) -> list[Station]:
        """List all stations."""
        return await self.execute(STATIONS)

    async def station_global_ids(self) -> list[StationGlobalId]:
        """List all station global ids."""
        return await self.execute(STATION_GLOBAL_IDS)

    async def lines(self) -> list[Line]:
        """List all lines."""
        return await self.execute(LINES)
