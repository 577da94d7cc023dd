"""Board configuration domain model."""

from dataclasses import dataclass

from tfl_departures.domain.models.station_configuration import StationConfiguration


@dataclass(frozen=True)
class BoardConfiguration:
    """Everything the engine needs to normalize, classify and schedule."""

    stations: tuple[StationConfiguration, StationConfiguration]
    station_name_suffix: str = " Underground Station"
    gettable_min_seconds: int = 300
    gettable_max_seconds: int = 480
    poll_interval_seconds: float = 30
    tick_interval_seconds: float = 1

    def __post_init__(self) -> None:
        if len(self.stations) != 2:
            raise ValueError(f"Exactly two stations are required, got {len(self.stations)}")
        if not 0 <= self.gettable_min_seconds <= self.gettable_max_seconds:
            raise ValueError(
                "gettable_min_seconds must be between 0 and gettable_max_seconds "
                f"(got {self.gettable_min_seconds} and {self.gettable_max_seconds})"
            )
        if self.poll_interval_seconds <= 0 or self.tick_interval_seconds <= 0:
            raise ValueError("poll and tick intervals must be positive")

    @property
    def direction_labels(self) -> frozenset[str]:
        return frozenset(station.direction_label for station in self.stations)
