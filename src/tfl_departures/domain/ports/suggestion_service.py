"""Suggestion service port."""

from datetime import datetime
from typing import Protocol

from tfl_departures.domain.models.departure import Departure
from tfl_departures.domain.models.suggestion import Suggestion
from tfl_departures.domain.models.time_band import TimeBand


class SuggestionService(Protocol):
    """Port for classifying departures and picking a suggestion at a given instant."""

    def classify(self, departure: Departure, now: datetime) -> TimeBand:
        """Classify a departure into a time band."""
        ...

    def remaining_seconds(self, departure: Departure, now: datetime) -> float:
        """Seconds until the departure, clamped at zero."""
        ...

    def suggest(self, departures: list[Departure], now: datetime) -> Suggestion:
        """Pick the best departure (or tied pair) to walk to."""
        ...
