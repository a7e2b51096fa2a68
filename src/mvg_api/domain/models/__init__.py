"""Domain models for the MVG API."""

from mvg_api.domain.models.api_model import ApiModel
from mvg_api.domain.models.departure import Departure
from mvg_api.domain.models.http import ApiRequest, HttpResponse
from mvg_api.domain.models.line import Line
from mvg_api.domain.models.location import Location
from mvg_api.domain.models.station import Station, StationGlobalId

__all__ = [
    "ApiModel",
    "ApiRequest",
    "Departure",
    "HttpResponse",
    "Line",
    "Location",
    "Station",
    "StationGlobalId",
]
