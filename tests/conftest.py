"""Shared fixtures for the departure board tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from tfl_departures.domain.models import BoardConfiguration, Departure, StationConfiguration

WANSTEAD_LABEL = "Westbound - Platform 1"
SNARESBROOK_LABEL = "Outer Rail - Platform 1"


@pytest.fixture
def now() -> datetime:
    """A fixed reference instant."""
    return datetime(2024, 5, 1, 8, 0, 0, tzinfo=UTC)


@pytest.fixture
def board_config() -> BoardConfiguration:
    """Board configuration for Wanstead and Snaresbrook."""
    return BoardConfiguration(
        stations=(
            StationConfiguration(station_id="940GZZLUWSD", direction_label=WANSTEAD_LABEL),
            StationConfiguration(station_id="940GZZLUSNB", direction_label=SNARESBROOK_LABEL),
        ),
    )


@pytest.fixture
def make_raw_arrival(now: datetime) -> Callable[..., dict[str, Any]]:
    """Factory for raw TfL arrival records relative to ``now``."""

    def _make(
        arrival_id: str,
        station: str = "Wanstead Underground Station",
        destination: str = "Ealing Broadway Underground Station",
        seconds: int = 360,
        platform: str = WANSTEAD_LABEL,
    ) -> dict[str, Any]:
        expected = now + timedelta(seconds=seconds)
        return {
            "$type": "Tfl.Api.Presentation.Entities.Prediction, Tfl.Api.Presentation.Entities",
            "id": arrival_id,
            "stationName": station,
            "destinationName": destination,
            "timeToStation": seconds,
            "platformName": platform,
            "expectedArrival": expected.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "lineName": "Central",
        }

    return _make


@pytest.fixture
def make_departure(now: datetime) -> Callable[..., Departure]:
    """Factory for departures leaving a number of seconds after ``now``."""

    def _make(
        departure_id: str,
        seconds: float,
        origin: str = "Wanstead",
        destination: str = "Ealing Broadway",
    ) -> Departure:
        return Departure(
            id=departure_id,
            origin=origin,
            destination=destination,
            departure_time=now + timedelta(seconds=seconds),
            time_to_station=int(seconds),
        )

    return _make
