"""State management for the board LiveView."""

from tfl_departures.adapters.web.state.board_state import BoardState
from tfl_departures.adapters.web.state.state import State

__all__ = ["BoardState", "State"]
