"""Tests for domain models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from tfl_departures.domain.models import (
    BoardConfiguration,
    Departure,
    RawArrival,
    StationConfiguration,
    Suggestion,
    TimeBand,
    Urgency,
)


def _stations() -> tuple[StationConfiguration, StationConfiguration]:
    return (
        StationConfiguration(station_id="A", direction_label="Westbound"),
        StationConfiguration(station_id="B", direction_label="Outer Rail"),
    )


def test_board_configuration_defaults() -> None:
    """Given only stations, when creating a board configuration, then defaults apply."""
    config = BoardConfiguration(stations=_stations())

    assert config.gettable_min_seconds == 300
    assert config.gettable_max_seconds == 480
    assert config.direction_labels == frozenset({"Westbound", "Outer Rail"})


def test_board_configuration_requires_two_stations() -> None:
    """Given three stations, when creating a board configuration, then ValueError is raised."""
    a, b = _stations()

    with pytest.raises(ValueError, match="Exactly two stations"):
        BoardConfiguration(stations=(a, b, a))  # type: ignore[arg-type]


@pytest.mark.parametrize(("minimum", "maximum"), [(500, 400), (-1, 100)])
def test_board_configuration_rejects_bad_window(minimum: int, maximum: int) -> None:
    """Given an inverted or negative window, when creating a board configuration, then ValueError is raised."""
    with pytest.raises(ValueError, match="gettable_min_seconds"):
        BoardConfiguration(
            stations=_stations(), gettable_min_seconds=minimum, gettable_max_seconds=maximum
        )


def test_board_configuration_rejects_non_positive_interval() -> None:
    """Given a zero poll interval, when creating a board configuration, then ValueError is raised."""
    with pytest.raises(ValueError, match="intervals must be positive"):
        BoardConfiguration(stations=_stations(), poll_interval_seconds=0)


def test_raw_arrival_parses_api_field_names() -> None:
    """Given an API record, when validating, then camelCase fields map and extras are ignored."""
    arrival = RawArrival.model_validate(
        {
            "id": "1",
            "stationName": "Wanstead Underground Station",
            "destinationName": "Ealing Broadway Underground Station",
            "timeToStation": 120,
            "platformName": "Westbound - Platform 1",
            "expectedArrival": "2024-05-01T08:02:00Z",
            "lineName": "Central",
        }
    )

    assert arrival.station_name == "Wanstead Underground Station"
    assert arrival.time_to_station == 120
    assert arrival.expected_arrival == datetime(2024, 5, 1, 8, 2, tzinfo=UTC)


def test_raw_arrival_treats_naive_timestamp_as_utc() -> None:
    """Given a timestamp without offset, when validating, then it is taken as UTC."""
    arrival = RawArrival.model_validate(
        {
            "id": "1",
            "stationName": "S",
            "destinationName": "D",
            "timeToStation": 1,
            "platformName": "P",
            "expectedArrival": "2024-05-01T08:02:00",
        }
    )

    assert arrival.expected_arrival.tzinfo is UTC


def test_raw_arrival_rejects_missing_field() -> None:
    """Given a record without timeToStation, when validating, then ValidationError is raised."""
    with pytest.raises(ValidationError):
        RawArrival.model_validate(
            {
                "id": "1",
                "stationName": "S",
                "destinationName": "D",
                "platformName": "P",
                "expectedArrival": "2024-05-01T08:02:00Z",
            }
        )


def test_empty_suggestion() -> None:
    """Given the empty suggestion, when inspecting it, then nothing is suggested."""
    suggestion = Suggestion.empty()

    assert suggestion.is_empty
    assert not suggestion.is_paired
    assert suggestion.origins == []
    assert suggestion.departure_time is None
    assert suggestion.urgency is None


def test_paired_suggestion_properties() -> None:
    """Given a paired suggestion, when inspecting it, then both origins and the urgency are exposed."""
    at = datetime(2024, 5, 1, 8, 6, tzinfo=UTC)
    primary = Departure("1", "Wanstead", "Ealing Broadway", at, 360)
    alternate = Departure("2", "Snaresbrook", "West Ruislip", at, 360)

    suggestion = Suggestion(TimeBand.GETTABLE, primary, alternate)

    assert suggestion.is_paired
    assert suggestion.origins == ["Wanstead", "Snaresbrook"]
    assert suggestion.departure_time == at
    assert suggestion.urgency is Urgency.LEAVE_NOW
    assert Suggestion(TimeBand.FAR_AWAY, primary).urgency is Urgency.NO_RUSH
