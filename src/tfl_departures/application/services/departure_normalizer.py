"""Normalization of raw arrivals from two stations into one departure list."""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from tfl_departures.domain.models import BoardConfiguration, Departure, RawArrival

logger = logging.getLogger(__name__)


class ArrivalValidationError(ValueError):
    """Raised when an arrival record does not match the expected shape."""


def strip_station_suffix(name: str, suffix: str) -> str:
    """Remove a trailing station-name suffix, leaving other names unchanged."""
    return name.removesuffix(suffix)


class DepartureNormalizer:
    """Merges, filters and sorts arrivals from the two monitored stations."""

    def __init__(self, config: BoardConfiguration) -> None:
        """Initialize with the board configuration."""
        self._direction_labels = config.direction_labels
        self._suffix = config.station_name_suffix

    def normalize(
        self,
        first_station_results: list[dict[str, Any]],
        second_station_results: list[dict[str, Any]],
    ) -> list[Departure]:
        """Build the canonical departure list from both stations' raw results.

        Every record is validated first; one bad record fails the whole call.

        Raises:
            ArrivalValidationError: If any record is malformed.
        """
        arrivals = self._validate(first_station_results) + self._validate(second_station_results)

        kept = [a for a in arrivals if a.platform_name in self._direction_labels]
        # list.sort is stable, so equal snapshots keep their input order
        kept.sort(key=lambda a: a.time_to_station)

        logger.debug(f"Normalized {len(kept)} of {len(arrivals)} arrivals")
        return [self._to_departure(a) for a in kept]

    @staticmethod
    def _validate(records: Iterable[Any]) -> list[RawArrival]:
        arrivals = []
        for index, record in enumerate(records):
            try:
                arrivals.append(RawArrival.model_validate(record))
            except ValidationError as e:
                raise ArrivalValidationError(f"Malformed arrival record at index {index}: {e}") from e
        return arrivals

    def _to_departure(self, arrival: RawArrival) -> Departure:
        return Departure(
            id=arrival.id,
            origin=strip_station_suffix(arrival.station_name, self._suffix),
            destination=strip_station_suffix(arrival.destination_name, self._suffix),
            departure_time=arrival.expected_arrival,
            time_to_station=arrival.time_to_station,
        )
