"""Protocol for formatting countdowns."""

from datetime import datetime
from typing import Protocol


class DepartureFormatterProtocol(Protocol):
    """Protocol for formatting remaining times and update times."""

    def format_countdown(self, remaining_seconds: float) -> str:
        """Format remaining time for the table (e.g., '2:05' or 'Departed')."""
        ...

    def format_suggestion_countdown(self, remaining_seconds: float) -> str:
        """Format remaining time in words (e.g., '2 minutes and 5 seconds')."""
        ...

    def format_update_time(self, update_time: datetime | None) -> str:
        """Format last update time, or 'Never' if None."""
        ...
