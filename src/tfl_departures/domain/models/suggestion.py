"""Suggestion domain model."""

from dataclasses import dataclass
from datetime import datetime

from tfl_departures.domain.models.departure import Departure
from tfl_departures.domain.models.time_band import TimeBand, Urgency


@dataclass(frozen=True)
class Suggestion:
    """The recommended departure, or a tied pair of departures, at one instant.

    A paired suggestion has an alternate leaving at exactly the same time as
    the primary but from a different origin.
    """

    band: TimeBand | None = None
    primary: Departure | None = None
    alternate: Departure | None = None

    @classmethod
    def empty(cls) -> "Suggestion":
        """Build the suggestion used when nothing is gettable or far away."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.primary is None

    @property
    def is_paired(self) -> bool:
        return self.primary is not None and self.alternate is not None

    @property
    def origins(self) -> list[str]:
        return [d.origin for d in (self.primary, self.alternate) if d is not None]

    @property
    def departure_time(self) -> datetime | None:
        return self.primary.departure_time if self.primary is not None else None

    @property
    def urgency(self) -> Urgency | None:
        if self.band is TimeBand.GETTABLE:
            return Urgency.LEAVE_NOW
        if self.band is TimeBand.FAR_AWAY:
            return Urgency.NO_RUSH
        return None
