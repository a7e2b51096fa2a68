"""Departure domain model."""

from datetime import UTC, datetime

from mvg_api.domain.models.api_model import ApiModel


def _from_epoch_millis(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


class Departure(ApiModel):
    """Represents a single upcoming departure from a station.

    Times are epoch milliseconds as delivered by upstream. Either time may be
    missing independently of the other.
    """

    transport_type: str | None = None
    label: str | None = None
    destination: str | None = None
    realtime_departure_time: int | None = None
    planned_departure_time: int | None = None
    banner_hash: str | None = None
    cancelled: bool | None = None
    delay_in_minutes: int | None = None  # can be negative
    diva_id: str | None = None
    messages: tuple[str, ...] | None = None
    network: str | None = None
    occupancy: str | None = None
    platform: int | None = None
    platform_changed: bool | None = None
    realtime: bool | None = None
    sev: bool | None = None
    stop_point_global_id: str | None = None
    stop_position_number: int | None = None
    train_type: str | None = None

    @property
    def realtime_departure(self) -> datetime | None:
        """Real-time departure as an aware UTC datetime."""
        return _from_epoch_millis(self.realtime_departure_time)

    @property
    def planned_departure(self) -> datetime | None:
        """Planned departure as an aware UTC datetime."""
        return _from_epoch_millis(self.planned_departure_time)
