"""State updaters for web adapter."""

from tfl_departures.adapters.web.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
