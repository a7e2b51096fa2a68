"""Static catalog of the MVG API operations."""

from dataclasses import dataclass
from typing import Any

from pydantic import TypeAdapter

from mvg_api.adapters.mvg_api.constants import (
    MVG_DEPARTURE_URL,
    MVG_LINES_URL,
    MVG_LOCATION_URL,
    MVG_STATION_GLOBAL_IDS_URL,
    MVG_STATION_NEARBY_URL,
    MVG_STATIONS_URL,
)
from mvg_api.domain.models import (
    ApiRequest,
    Departure,
    Line,
    Location,
    Station,
    StationGlobalId,
)


@dataclass(frozen=True)
class Endpoint:
    """One upstream operation.

    ``params`` maps each Python argument name to its upstream query key.
    """

    name: str
    method: str
    url: str
    params: tuple[tuple[str, str], ...]
    result_type: TypeAdapter[Any]

    def build_request(self, **values: Any) -> ApiRequest:
        """Build the request for this endpoint from keyword arguments."""
        expected = {name for name, _ in self.params}
        if set(values) != expected:
            raise TypeError(
                f"{self.name} expects parameters {sorted(expected)}, got {sorted(values)}"
            )
        query = {key: values[name] for name, key in self.params}
        return ApiRequest(method=self.method, url=self.url, params=query)


LOCATIONS = Endpoint(
    name="locations",
    method="GET",
    url=MVG_LOCATION_URL,
    params=(("query", "query"),),
    result_type=TypeAdapter(list[Location]),
)

DEPARTURES = Endpoint(
    name="departures",
    method="GET",
    url=MVG_DEPARTURE_URL,
    params=(("global_id", "globalId"),),
    result_type=TypeAdapter(list[Departure]),
)

NEARBY_LOCATIONS = Endpoint(
    name="nearby_locations",
    method="GET",
    url=MVG_STATION_NEARBY_URL,
    params=(("latitude", "latitude"), ("longitude", "longitude")),
    result_type=TypeAdapter(list[Location]),
)

STATIONS = Endpoint(
    name="stations",
    method="GET",
    url=MVG_STATIONS_URL,
    params=(),
    result_type=TypeAdapter(list[Station]),
)

STATION_GLOBAL_IDS = Endpoint(
    name="station_global_ids",
    method="GET",
    url=MVG_STATION_GLOBAL_IDS_URL,
    params=(),
    result_type=TypeAdapter(list[StationGlobalId]),
)

LINES = Endpoint(
    name="lines",
    method="GET",
    url=MVG_LINES_URL,
    params=(),
    result_type=TypeAdapter(list[Line]),
)

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (LOCATIONS, DEPARTURES, NEARBY_LOCATIONS, STATIONS, STATION_GLOBAL_IDS, LINES)
}
