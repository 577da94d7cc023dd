"""Time-band classification of departures."""

from datetime import datetime

from tfl_departures.domain.models import Departure, TimeBand


class StatusClassifier:
    """Classifies a departure by how long remains until it leaves."""

    def __init__(self, gettable_min_seconds: int = 300, gettable_max_seconds: int = 480) -> None:
        self.gettable_min_seconds = gettable_min_seconds
        self.gettable_max_seconds = gettable_max_seconds

    @staticmethod
    def remaining_seconds(departure: Departure, now: datetime) -> float:
        """Seconds until departure, never negative."""
        return max(0.0, (departure.departure_time - now).total_seconds())

    def classify(self, departure: Departure, now: datetime) -> TimeBand:
        """Classify a departure relative to ``now``.

        The gettable window is inclusive at both ends.
        """
        remaining = self.remaining_seconds(departure, now)
        if remaining < self.gettable_min_seconds:
            return TimeBand.TOO_SOON
        if remaining <= self.gettable_max_seconds:
            return TimeBand.GETTABLE
        return TimeBand.FAR_AWAY
