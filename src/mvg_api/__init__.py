"""Async client for the unofficial MVG (Munich public transport) API."""

from mvg_api.api import (
    departures,
    lines,
    locations,
    nearby_locations,
    station_global_ids,
    stations,
)
from mvg_api.domain import (
    DecodeError,
    Departure,
    Line,
    Location,
    MvgApiError,
    Station,
    StationGlobalId,
    TransportError,
)

__all__ = [
    "DecodeError",
    "Departure",
    "Line",
    "Location",
    "MvgApiError",
    "Station",
    "StationGlobalId",
    "TransportError",
    "departures",
    "lines",
    "locations",
    "nearby_locations",
    "station_global_ids",
    "stations",
]
