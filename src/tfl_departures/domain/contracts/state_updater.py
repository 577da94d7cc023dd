"""Protocol for updating board state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from tfl_departures.domain.models.departure import Departure


class StateUpdaterProtocol(Protocol):
    """Protocol for updating board state."""

    def update_departures(self, departures: list["Departure"]) -> None:
        """Replace the whole departure list.

        Args:
            departures: The freshly normalized departures.
        """
        ...

    def update_now(self, now: "datetime") -> None:
        """Advance the shared reference instant.

        Args:
            now: The current instant.
        """
        ...

    def update_api_status(self, status: str) -> None:
        """Update the API status in the state.

        Args:
            status: The API status ("success" or "error").
        """
        ...

    def update_last_update_time(self, time: "datetime") -> None:
        """Update the last update timestamp in the state.

        Args:
            time: The timestamp of the last update.
        """
        ...
