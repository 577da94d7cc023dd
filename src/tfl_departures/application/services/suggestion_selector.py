"""Selection of the departure to suggest."""

import logging
from datetime import datetime

from tfl_departures.domain.models import Departure, Suggestion, TimeBand

from .status_classifier import StatusClassifier

logger = logging.getLogger(__name__)


class SuggestionSelector:
    """Picks the best departure to walk to, or a tied pair of stations."""

    def __init__(self, classifier: StatusClassifier) -> None:
        self.classifier = classifier

    def select(self, departures: list[Departure], now: datetime) -> Suggestion:
        """Select a suggestion from ``departures`` at instant ``now``.

        Gettable departures are preferred over far away ones; departures that
        are too soon are never suggested. When another departure in the same
        band leaves at exactly the same instant from a different origin, the
        result is a pair and no single destination is implied.
        """
        gettable: list[Departure] = []
        far_away: list[Departure] = []
        for departure in departures:
            band = self.classifier.classify(departure, now)
            if band is TimeBand.GETTABLE:
                gettable.append(departure)
            elif band is TimeBand.FAR_AWAY:
                far_away.append(departure)

        if gettable:
            band, candidates = TimeBand.GETTABLE, gettable
        elif far_away:
            band, candidates = TimeBand.FAR_AWAY, far_away
        else:
            return Suggestion.empty()

        primary = self._earliest(candidates)
        alternate = next(
            (
                d
                for d in candidates
                if d is not primary
                and d.departure_time == primary.departure_time
                and d.origin != primary.origin
            ),
            None,
        )
        # Destination is not compared when pairing
        return Suggestion(band=band, primary=primary, alternate=alternate)

    @staticmethod
    def _earliest(candidates: list[Departure]) -> Departure:
        # Strict comparison keeps the first-encountered departure on ties
        earliest = candidates[0]
        for departure in candidates[1:]:
            if departure.departure_time < earliest.departure_time:
                earliest = departure
        return earliest
