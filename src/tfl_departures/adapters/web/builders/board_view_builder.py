"""Builder for the data shown on the board at one instant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tfl_departures.domain.models import Suggestion, Urgency

if TYPE_CHECKING:
    from datetime import datetime

    from tfl_departures.domain.contracts import DepartureFormatterProtocol
    from tfl_departures.domain.models import Departure
    from tfl_departures.domain.ports import SuggestionService

logger = logging.getLogger(__name__)

NO_DEPARTURES_MESSAGE = "No departures found."
NO_SUGGESTION_MESSAGE = "No gettable or far away trains right now."

_URGENCY_SUFFIX = {
    Urgency.LEAVE_NOW: " - leave now!",
    Urgency.NO_RUSH: " - no rush!",
}


class BoardViewBuilder:
    """Builds template data for the suggestion panel and the departure table."""

    def __init__(
        self, suggestion_service: SuggestionService, formatter: DepartureFormatterProtocol
    ) -> None:
        """Initialize the builder.

        Args:
            suggestion_service: Classifies departures and picks the suggestion.
            formatter: Formats countdowns.
        """
        self.suggestion_service = suggestion_service
        self.formatter = formatter

    def build_rows(self, departures: list[Departure], now: datetime) -> list[dict[str, str]]:
        """Build one table row per departure, in list order."""
        rows = []
        for departure in departures:
            band = self.suggestion_service.classify(departure, now)
            remaining = self.suggestion_service.remaining_seconds(departure, now)
            rows.append(
                {
                    "id": departure.id,
                    "origin": departure.origin,
                    "destination": departure.destination,
                    "countdown": self.formatter.format_countdown(remaining),
                    "status": band.value,
                    "status_class": band.name.lower().replace("_", "-"),
                }
            )
        return rows

    def build_suggestion(self, suggestion: Suggestion, now: datetime) -> dict[str, str]:
        """Build the headline and detail line for a suggestion."""
        if suggestion.is_empty or suggestion.primary is None:
            return {
                "suggestion_headline": NO_SUGGESTION_MESSAGE,
                "suggestion_detail": "",
                "suggestion_urgency": "none",
            }

        primary = suggestion.primary
        if suggestion.alternate is not None:
            # The two stations may serve different destinations at that instant
            headline = f"Go to {primary.origin} or {suggestion.alternate.origin}"
        else:
            headline = f"Go to {primary.origin} for the train to {primary.destination}"

        remaining = self.suggestion_service.remaining_seconds(primary, now)
        countdown = self.formatter.format_suggestion_countdown(remaining)
        urgency = suggestion.urgency
        suffix = _URGENCY_SUFFIX.get(urgency, "") if urgency is not None else ""
        return {
            "suggestion_headline": headline,
            "suggestion_detail": f"Departing in {countdown}{suffix}",
            "suggestion_urgency": urgency.value if urgency is not None else "none",
        }

    def build(self, departures: list[Departure], now: datetime) -> dict[str, Any]:
        """Build all template data for the board at instant ``now``."""
        suggestion = self.suggestion_service.suggest(departures, now)
        rows = self.build_rows(departures, now)
        logger.debug(f"Built board with {len(rows)} rows, suggestion paired={suggestion.is_paired}")
        return {
            "rows": rows,
            "has_departures": bool(rows),
            "no_departures_message": NO_DEPARTURES_MESSAGE,
            **self.build_suggestion(suggestion, now),
        }
