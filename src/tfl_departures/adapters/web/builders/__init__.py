"""Builders for web adapter."""

from tfl_departures.adapters.web.builders.board_view_builder import BoardViewBuilder

__all__ = ["BoardViewBuilder"]
