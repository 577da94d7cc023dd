"""Broadcasters for web adapter."""

from tfl_departures.adapters.web.broadcasters.state_broadcaster import StateBroadcaster

__all__ = ["StateBroadcaster"]
