"""TfL arrival repository adapter."""

import logging
from typing import TYPE_CHECKING, Any

from tfl_departures.adapters.tfl_api.http_client import TflHttpClient
from tfl_departures.domain.ports.arrival_repository import ArrivalRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from tfl_departures.adapters.config.app_config import AppConfig


class TflArrivalRepository(ArrivalRepository):
    """Adapter for fetching raw arrivals from the TfL unified API."""

    def __init__(self, http_client: TflHttpClient) -> None:
        """Initialize with an HTTP client."""
        self._http_client = http_client

    @classmethod
    def from_config(cls, session: "ClientSession", config: "AppConfig") -> "TflArrivalRepository":
        """Create a repository using the TfL settings from app config."""
        return cls(
            TflHttpClient(
                session=session,
                url_template=config.tfl_api_url_template,
                app_key=config.tfl_app_key,
                timeout_seconds=config.tfl_api_timeout,
            )
        )

    async def get_arrivals(self, station_id: str) -> list[dict[str, Any]]:
        """Get raw arrivals for a station, raising on any failure."""
        arrivals = await self._http_client.fetch_arrivals(station_id)
        logger.debug(f"Fetched {len(arrivals)} raw arrivals for station {station_id}")
        return arrivals
