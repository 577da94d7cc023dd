"""Domain layer - core models and interfaces."""

from tfl_departures.domain.models import (
    BoardConfiguration,
    Departure,
    StationConfiguration,
    Suggestion,
    TimeBand,
)
from tfl_departures.domain.ports import (
    ArrivalRepository,
    DisplayAdapter,
    SuggestionService,
)

__all__ = [
    "ArrivalRepository",
    "BoardConfiguration",
    "Departure",
    "DisplayAdapter",
    "StationConfiguration",
    "Suggestion",
    "SuggestionService",
    "TimeBand",
]
