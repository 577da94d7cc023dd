"""Board state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from tfl_departures.domain.models.departure import Departure


@dataclass
class BoardState:
    """State for the departure board LiveView."""

    departures: list[Departure] = field(default_factory=list)
    now: datetime | None = None  # Shared reference instant, advanced by the tick timer
    last_update: datetime | None = None
    api_status: str = "unknown"
