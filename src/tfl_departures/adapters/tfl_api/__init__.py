"""TfL unified API adapters."""

from tfl_departures.adapters.tfl_api.http_client import TflHttpClient
from tfl_departures.adapters.tfl_api.tfl_arrival_repository import TflArrivalRepository

__all__ = ["TflArrivalRepository", "TflHttpClient"]
