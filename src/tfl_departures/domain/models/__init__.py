"""Domain models for the twin-station departure board."""

from tfl_departures.domain.models.board_configuration import BoardConfiguration
from tfl_departures.domain.models.departure import Departure
from tfl_departures.domain.models.error_details import ErrorDetails
from tfl_departures.domain.models.raw_arrival import RawArrival
from tfl_departures.domain.models.station_configuration import StationConfiguration
from tfl_departures.domain.models.suggestion import Suggestion
from tfl_departures.domain.models.time_band import TimeBand, Urgency

__all__ = [
    "BoardConfiguration",
    "Departure",
    "ErrorDetails",
    "RawArrival",
    "StationConfiguration",
    "Suggestion",
    "TimeBand",
    "Urgency",
]
