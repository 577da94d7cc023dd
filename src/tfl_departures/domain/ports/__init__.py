"""Ports (interfaces) for the ports-and-adapters architecture."""

from tfl_departures.domain.ports.arrival_repository import ArrivalRepository
from tfl_departures.domain.ports.display_adapter import DisplayAdapter
from tfl_departures.domain.ports.suggestion_service import SuggestionService

__all__ = [
    "ArrivalRepository",
    "DisplayAdapter",
    "SuggestionService",
]
