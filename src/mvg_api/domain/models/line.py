"""Line domain model."""

from mvg_api.domain.models.api_model import ApiModel
from mvg_api.domain.models.station import StationGlobalId


class Line(ApiModel):
    """Represents a transit line.

    Example payload: ``{"lineNumber": 2012, "name": "12", "product": "TRAM"}``.
    """

    name: str | None = None
    product: str | None = None
    line_number: int | None = None  # -1 for night lines
    stations: tuple[StationGlobalId, ...] | None = None
