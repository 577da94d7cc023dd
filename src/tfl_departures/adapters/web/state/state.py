"""State management class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .board_state import BoardState

if TYPE_CHECKING:
    from pyview import LiveViewSocket

logger = logging.getLogger(__name__)


class State:
    """Manages shared state for the board LiveView and its connected sockets."""

    def __init__(self, route_path: str = "/") -> None:
        """Initialize the state manager.

        Args:
            route_path: The path for this board, used to create a unique topic.
        """
        self.route_path = route_path
        self.board_state = BoardState()
        self.connected_sockets: set[LiveViewSocket[BoardState]] = set()
        # Normalize path: remove leading/trailing slashes and replace / with :
        normalized_path = route_path.strip("/").replace("/", ":") or "root"
        self.broadcast_topic: str = f"board:updates:{normalized_path}"

    def snapshot(self) -> BoardState:
        """Copy the shared state for a single socket's context."""
        return BoardState(
            departures=self.board_state.departures,
            now=self.board_state.now,
            last_update=self.board_state.last_update,
            api_status=self.board_state.api_status,
        )

    def register_socket(self, socket: LiveViewSocket[BoardState]) -> None:
        """Register a socket for updates."""
        self.connected_sockets.add(socket)
        logger.info(f"Registered socket, total connected: {len(self.connected_sockets)}")

    def unregister_socket(self, socket: LiveViewSocket[BoardState]) -> None:
        """Unregister a socket. Idempotent."""
        self.connected_sockets.discard(socket)
        logger.info(f"Unregistered socket, total connected: {len(self.connected_sockets)}")
