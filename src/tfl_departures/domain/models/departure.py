"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from one of the monitored stations."""

    id: str
    origin: str
    destination: str
    departure_time: datetime  # Absolute predicted arrival, never a relative offset
    time_to_station: int  # Seconds until arrival as reported at fetch time
