"""Contracts between the application core and its collaborators."""

from tfl_departures.domain.contracts.board_scheduler import BoardSchedulerProtocol
from tfl_departures.domain.contracts.departure_formatter import DepartureFormatterProtocol
from tfl_departures.domain.contracts.state_broadcaster import StateBroadcasterProtocol
from tfl_departures.domain.contracts.state_updater import StateUpdaterProtocol

__all__ = [
    "BoardSchedulerProtocol",
    "DepartureFormatterProtocol",
    "StateBroadcasterProtocol",
    "StateUpdaterProtocol",
]
