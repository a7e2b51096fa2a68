"""Shared pytest fixtures."""

import pytest
from mvg_fixtures import (
    DEPARTURES_PAYLOAD,
    LINES_PAYLOAD,
    LOCATIONS_PAYLOAD,
    NEARBY_PAYLOAD,
    STATION_GLOBAL_IDS_PAYLOAD,
    STATIONS_PAYLOAD,
    FixtureTransport,
    encode,
)

from mvg_api.adapters.mvg_api.constants import (
    MVG_DEPARTURE_URL,
    MVG_LINES_URL,
    MVG_LOCATION_URL,
    MVG_STATION_GLOBAL_IDS_URL,
    MVG_STATION_NEARBY_URL,
    MVG_STATIONS_URL,
)


@pytest.fixture
def fixture_transport() -> FixtureTransport:
    """Transport serving a well-formed fixture for every endpoint."""
    return FixtureTransport(
        {
            MVG_LOCATION_URL: encode(LOCATIONS_PAYLOAD),
            MVG_STATION_NEARBY_URL: encode(NEARBY_PAYLOAD),
            MVG_DEPARTURE_URL: encode(DEPARTURES_PAYLOAD),
            MVG_STATIONS_URL: encode(STATIONS_PAYLOAD),
            MVG_STATION_GLOBAL_IDS_URL: encode(STATION_GLOBAL_IDS_PAYLOAD),
            MVG_LINES_URL: encode(LINES_PAYLOAD),
        }
    )
