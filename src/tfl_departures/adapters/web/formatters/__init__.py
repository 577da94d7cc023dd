"""Formatters for web adapter."""

from tfl_departures.adapters.web.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
