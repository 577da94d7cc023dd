"""Formatter for countdowns and update times."""

from datetime import datetime
from zoneinfo import ZoneInfo

from tfl_departures.adapters.config.app_config import AppConfig
from tfl_departures.domain.contracts.departure_formatter import DepartureFormatterProtocol

DEPARTED = "Departed"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class DepartureFormatter(DepartureFormatterProtocol):
    """Formatter for remaining times based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone settings.
        """
        self.config = config

    def format_countdown(self, remaining_seconds: float) -> str:
        """Format remaining time as 'M:SS' (e.g., '2:05'), or 'Departed'."""
        if remaining_seconds <= 0:
            return DEPARTED
        minutes, seconds = divmod(int(remaining_seconds), 60)
        return f"{minutes}:{seconds:02d}"

    def format_suggestion_countdown(self, remaining_seconds: float) -> str:
        """Format remaining time in words (e.g., '2 minutes and 5 seconds'), or 'Departed'."""
        if remaining_seconds <= 0:
            return DEPARTED
        minutes, seconds = divmod(int(remaining_seconds), 60)
        return f"{_plural(minutes, 'minute')} and {_plural(seconds, 'second')}"

    def format_update_time(self, update_time: datetime | None) -> str:
        """Format last update time in the configured timezone."""
        if not update_time:
            return "Never"
        return update_time.astimezone(ZoneInfo(self.config.timezone)).strftime("%H:%M:%S")
