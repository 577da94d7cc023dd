"""Updater for board state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tfl_departures.adapters.web.state.board_state import (
    BoardState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from tfl_departures.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from tfl_departures.domain.models.departure import Departure

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Updates board state with whole-value swaps."""

    def __init__(self, board_state: BoardState) -> None:
        """Initialize the state updater.

        Args:
            board_state: The BoardState instance to update.
        """
        self.board_state = board_state

    def update_departures(self, departures: list[Departure]) -> None:
        """Replace the departure list in the state.

        Args:
            departures: The new departure list.
        """
        self.board_state.departures = list(departures)
        logger.debug(f"Updated departures: {len(departures)} departures")

    def update_now(self, now: datetime) -> None:
        """Advance the shared reference instant."""
        self.board_state.now = now

    def update_api_status(self, status: str) -> None:
        """Update the API status in the state.

        Args:
            status: The API status ("success" or "error").
        """
        self.board_state.api_status = status
        logger.debug(f"Updated API status: {status}")

    def update_last_update_time(self, time: datetime) -> None:
        """Update the last update timestamp in the state.

        Args:
            time: The timestamp of the last update.
        """
        self.board_state.last_update = time
        logger.debug(f"Updated last update time: {time}")
