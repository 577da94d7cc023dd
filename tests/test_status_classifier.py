"""Tests for StatusClassifier."""

from collections.abc import Callable
from datetime import datetime, timedelta

import pytest

from tfl_departures.application.services import StatusClassifier
from tfl_departures.domain.models import Departure, TimeBand


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, TimeBand.TOO_SOON),
        (299, TimeBand.TOO_SOON),
        (299.9, TimeBand.TOO_SOON),
        (300, TimeBand.GETTABLE),
        (400, TimeBand.GETTABLE),
        (480, TimeBand.GETTABLE),
        (480.5, TimeBand.FAR_AWAY),
        (481, TimeBand.FAR_AWAY),
        (3600, TimeBand.FAR_AWAY),
    ],
)
def test_classify_boundaries(
    make_departure: Callable[..., Departure], now: datetime, seconds: float, expected: TimeBand
) -> None:
    """Given a departure N seconds away, when classifying, then the band respects inclusive bounds."""
    classifier = StatusClassifier()

    assert classifier.classify(make_departure("a", seconds), now) is expected


def test_past_departure_is_too_soon_with_zero_remaining(
    make_departure: Callable[..., Departure], now: datetime
) -> None:
    """Given a departure already due, when classifying, then remaining time clamps to zero."""
    classifier = StatusClassifier()
    departure = make_departure("a", -45)

    assert classifier.remaining_seconds(departure, now) == 0.0
    assert classifier.classify(departure, now) is TimeBand.TOO_SOON


def test_bands_progress_from_far_away_to_too_soon_as_time_advances(
    make_departure: Callable[..., Departure], now: datetime
) -> None:
    """Given a fixed departure, when now advances, then bands only move FarAway -> Gettable -> TooSoon."""
    classifier = StatusClassifier()
    departure = make_departure("a", 600)
    order = [TimeBand.FAR_AWAY, TimeBand.GETTABLE, TimeBand.TOO_SOON]

    bands = [classifier.classify(departure, now + timedelta(seconds=s)) for s in range(0, 700, 10)]

    indexes = [order.index(band) for band in bands]
    assert indexes == sorted(indexes)
    assert bands[0] is TimeBand.FAR_AWAY
    assert TimeBand.GETTABLE in bands
    assert bands[-1] is TimeBand.TOO_SOON
    assert classifier.remaining_seconds(departure, now + timedelta(seconds=690)) == 0.0


def test_custom_thresholds(make_departure: Callable[..., Departure], now: datetime) -> None:
    """Given custom thresholds, when classifying, then they replace the defaults."""
    classifier = StatusClassifier(gettable_min_seconds=60, gettable_max_seconds=120)

    assert classifier.classify(make_departure("a", 59), now) is TimeBand.TOO_SOON
    assert classifier.classify(make_departure("b", 60), now) is TimeBand.GETTABLE
    assert classifier.classify(make_departure("c", 121), now) is TimeBand.FAR_AWAY
