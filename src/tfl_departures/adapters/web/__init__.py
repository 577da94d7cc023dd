"""Web adapters for displaying the departure board."""

from tfl_departures.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
