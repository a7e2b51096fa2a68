"""Location domain model."""

from pydantic import Field

from mvg_api.domain.models.api_model import ApiModel

STATION_LOCATION_TYPE = "STATION"


class Location(ApiModel):
    """A search result: a station, address, POI or line, depending on which fields are set.

    Example payload (``/location?query=Karlsplatz``)::

        {"aliases": "Stachus Bf. Bahnhof Muenchen Munchen KA",
         "divaId": 1,
         "globalId": "de:09162:1",
         "hasZoomData": true,
         "latitude": 48.13951,
         "longitude": 11.56613,
         "name": "Karlsplatz (Stachus)",
         "place": "München",
         "surroundingPlanLink": "KA",
         "tariffZones": "m",
         "transportTypes": ["UBAHN", "BUS", "TRAM", "SBAHN"],
         "type": "STATION"}
    """

    name: str | None = None
    global_id: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    distance_in_meters: int | None = None  # nearby search only
    location_type: str | None = Field(default=None, alias="type")
    transport_types: tuple[str, ...] | None = None
    aliases: str | None = None
    diva_id: int | None = None
    has_zoom_data: bool | None = None
    place: str | None = None
    surrounding_plan_link: str | None = None
    tariff_zones: str | None = None

    @property
    def is_station(self) -> bool:
        """Whether upstream tagged this location as a station."""
        return self.location_type == STATION_LOCATION_TYPE
