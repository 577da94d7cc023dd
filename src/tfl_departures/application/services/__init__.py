"""Application services (use cases) for the departure board."""

from tfl_departures.application.services.board_scheduler import BoardScheduler
from tfl_departures.application.services.departure_normalizer import (
    ArrivalValidationError,
    DepartureNormalizer,
    strip_station_suffix,
)
from tfl_departures.application.services.status_classifier import StatusClassifier
from tfl_departures.application.services.suggestion_selector import SuggestionSelector
from tfl_departures.application.services.suggestion_service import DepartureSuggestionService

__all__ = [
    "ArrivalValidationError",
    "BoardScheduler",
    "DepartureNormalizer",
    "DepartureSuggestionService",
    "StatusClassifier",
    "SuggestionSelector",
    "strip_station_suffix",
]
