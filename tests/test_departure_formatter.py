"""Tests for DepartureFormatter."""

from datetime import UTC, datetime

import pytest

from tfl_departures.adapters.config import AppConfig
from tfl_departures.adapters.web.formatters import DepartureFormatter


@pytest.fixture
def formatter() -> DepartureFormatter:
    """Formatter using London time."""
    return DepartureFormatter(AppConfig(timezone="Europe/London", _env_file=None))


@pytest.mark.parametrize(
    ("remaining", "expected"),
    [
        (125, "2:05"),
        (125.9, "2:05"),
        (59, "0:59"),
        (600, "10:00"),
        (0, "Departed"),
        (-5, "Departed"),
    ],
)
def test_format_countdown(formatter: DepartureFormatter, remaining: float, expected: str) -> None:
    """Given remaining seconds, when formatting the table countdown, then it reads M:SS or Departed."""
    assert formatter.format_countdown(remaining) == expected


@pytest.mark.parametrize(
    ("remaining", "expected"),
    [
        (125, "2 minutes and 5 seconds"),
        (61, "1 minute and 1 second"),
        (30, "0 minutes and 30 seconds"),
        (0, "Departed"),
    ],
)
def test_format_suggestion_countdown(
    formatter: DepartureFormatter, remaining: float, expected: str
) -> None:
    """Given remaining seconds, when formatting the suggestion countdown, then it reads in words."""
    assert formatter.format_suggestion_countdown(remaining) == expected


def test_format_update_time(formatter: DepartureFormatter) -> None:
    """Given an update time, when formatting, then it is shown in the configured timezone."""
    # 1 May is in British Summer Time (UTC+1)
    assert formatter.format_update_time(datetime(2024, 5, 1, 8, 0, 5, tzinfo=UTC)) == "09:00:05"


def test_format_update_time_never(formatter: DepartureFormatter) -> None:
    """Given no update yet, when formatting, then 'Never' is shown."""
    assert formatter.format_update_time(None) == "Never"
