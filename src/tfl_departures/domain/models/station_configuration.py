"""Station configuration domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationConfiguration:
    """A monitored station and the platform label that faces the traveler's direction."""

    station_id: str  # TfL StopPoint id, e.g. "940GZZLUWSD"
    direction_label: str  # Exact platformName to keep, e.g. "Westbound - Platform 1"
