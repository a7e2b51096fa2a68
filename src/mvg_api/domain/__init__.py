"""Domain layer - records, errors and ports."""

from mvg_api.domain.exceptions import DecodeError, MvgApiError, TransportError
from mvg_api.domain.models import (
    Departure,
    Line,
    Location,
    Station,
    StationGlobalId,
)
from mvg_api.domain.ports import HttpTransport

__all__ = [
    "DecodeError",
    "Departure",
    "HttpTransport",
    "Line",
    "Location",
    "MvgApiError",
    "Station",
    "StationGlobalId",
    "TransportError",
]
