"""Application service combining classification and suggestion selection."""

from datetime import datetime

from tfl_departures.domain.models import BoardConfiguration, Departure, Suggestion, TimeBand
from tfl_departures.domain.ports import SuggestionService

from .status_classifier import StatusClassifier
from .suggestion_selector import SuggestionSelector


class DepartureSuggestionService(SuggestionService):
    """Pure, side-effect free view of departures at a given instant."""

    def __init__(self, config: BoardConfiguration) -> None:
        """Initialize with the band thresholds from the board configuration."""
        self._classifier = StatusClassifier(
            gettable_min_seconds=config.gettable_min_seconds,
            gettable_max_seconds=config.gettable_max_seconds,
        )
        self._selector = SuggestionSelector(self._classifier)

    def classify(self, departure: Departure, now: datetime) -> TimeBand:
        return self._classifier.classify(departure, now)

    def remaining_seconds(self, departure: Departure, now: datetime) -> float:
        return self._classifier.remaining_seconds(departure, now)

    def suggest(self, departures: list[Departure], now: datetime) -> Suggestion:
        return self._selector.select(departures, now)
