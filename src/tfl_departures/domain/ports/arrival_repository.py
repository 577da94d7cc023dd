"""Arrival repository port."""

from typing import Any, Protocol


class ArrivalRepository(Protocol):
    """Port for retrieving raw arrival records for a station."""

    async def get_arrivals(self, station_id: str) -> list[dict[str, Any]]:
        """Get raw arrival records for a station.

        Implementations must raise on any failure rather than return a partial
        or empty list, so callers can tell a failed fetch from a quiet station.
        """
        ...
