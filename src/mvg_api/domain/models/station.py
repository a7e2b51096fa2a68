"""Station domain model."""

from pydantic import Field

from mvg_api.domain.models.api_model import ApiModel

# Examples of valid ids are "de:09162:1" and "de:09162:9029".
StationGlobalId = str


class Station(ApiModel):
    """Represents a public transport station ("Haltestelle")."""

    name: str | None = None
    global_id: StationGlobalId | None = Field(default=None, alias="id")
    latitude: float | None = None
    longitude: float | None = None
    transport_types: tuple[str, ...] | None = Field(default=None, alias="products")
    abbreviation: str | None = None
    diva_id: int | None = None
    place: str | None = None
    tariff_zones: str | None = None
