"""Adapters layer - external system integrations."""

from tfl_departures.adapters.config import AppConfig
from tfl_departures.adapters.tfl_api import TflArrivalRepository

__all__ = [
    "AppConfig",
    "TflArrivalRepository",
]
