"""Tests for the public async functions."""

from unittest.mock import MagicMock, patch

import pytest
from mvg_fixtures import FixtureTransport

import mvg_api
from mvg_api import api


def test_public_functions_are_exported() -> None:
    """Given the package, when importing, then every operation is available at the top level."""
    for name in (
        "locations",
        "departures",
        "nearby_locations",
        "stations",
        "station_global_ids",
        "lines",
    ):
        assert getattr(mvg_api, name) is getattr(api, name)


@pytest.mark.asyncio
async def test_locations_with_transport(fixture_transport: FixtureTransport) -> None:
    """Given the Starnberg fixture, when calling locations, then names match the fixture order."""
    result = await mvg_api.locations("Starnberg Nord", transport=fixture_transport)

    assert [location.name for location in result] == [
        "Starnberg Nord",
        "P+R Starnberg Nord",
        "B+R Starnberg-Nord 02 (Hans-Zellner-Weg)",
    ]


@pytest.mark.asyncio
async def test_departures_with_transport(fixture_transport: FixtureTransport) -> None:
    """Given the departures fixture, when calling departures, then labels match."""
    result = await mvg_api.departures("de:09188:5760", transport=fixture_transport)

    assert [departure.label for departure in result] == ["S6", "975"]


@pytest.mark.asyncio
async def test_departures_rejects_empty_global_id(fixture_transport: FixtureTransport) -> None:
    """Given an empty global id, when calling departures, then ValueError is raised."""
    with pytest.raises(ValueError):
        await mvg_api.departures("", transport=fixture_transport)


@pytest.mark.asyncio
async def test_listing_functions_with_transport(fixture_transport: FixtureTransport) -> None:
    """Given fixtures for the listing endpoints, when calling them, then each sends one request."""
    stations = await mvg_api.stations(transport=fixture_transport)
    ids = await mvg_api.station_global_ids(transport=fixture_transport)
    lines = await mvg_api.lines(transport=fixture_transport)
    nearby = await mvg_api.nearby_locations(48.138611, 11.573889, transport=fixture_transport)

    assert stations[0].name == "Karlsplatz (Stachus)"
    assert ids[0] == "de:09162:1"
    assert lines[1].name == "12"
    assert nearby[0].distance_in_meters == 142
    assert len(fixture_transport.requests) == 4


@pytest.mark.asyncio
async def test_session_is_wrapped_in_aiohttp_transport(
    fixture_transport: FixtureTransport,
) -> None:
    """Given a caller session, when calling lines, then the session backs the transport."""
    session = MagicMock()

    with patch("mvg_api.api.AiohttpTransport", return_value=fixture_transport) as transport_cls:
        result = await mvg_api.lines(session=session)

    transport_cls.assert_called_once_with(session)
    assert len(result) == 3
