"""HTTP client for the TfL StopPoint arrivals endpoint.

API Documentation: https://api.tfl.gov.uk/swagger/ui/index.html
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from tfl_departures.adapters.api_request_logger import log_api_request

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TflHttpClient:
    """HTTP client for TfL arrivals requests.

    Unlike a best-effort client, every failure is raised: a station that
    could not be fetched must never look like a station with no trains.
    """

    def __init__(
        self,
        session: "ClientSession",
        url_template: str = "https://api.tfl.gov.uk/StopPoint/{station_id}/arrivals",
        app_key: str | None = None,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            url_template: Arrivals URL with a {station_id} placeholder.
            app_key: Optional TfL app_key query parameter.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._url_template = url_template
        self._app_key = app_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def build_url(self, station_id: str) -> str:
        """Build the arrivals URL for a station."""
        return self._url_template.format(station_id=station_id)

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        retry_after = response.headers.get("Retry-After")
        extra_info = f" [Retry-After: {retry_after}]" if retry_after else ""
        logger.error(f"TfL API returned status {response.status} for {url}: {error_body}{extra_info}")

    async def _handle_arrivals_response(
        self, response: "ClientResponse", url: str
    ) -> list[dict[str, Any]]:
        """Handle arrivals API response."""
        if response.status != 200:
            await self._log_error_response(response, url)
            raise RuntimeError(f"Bad API call: Got response ({response.status}) from {url}")

        data = await response.json(content_type=None)
        if not isinstance(data, list):
            raise RuntimeError(f"Unexpected arrivals payload from {url}: {type(data).__name__}")
        return data

    async def fetch_arrivals(self, station_id: str) -> list[dict[str, Any]]:
        """Fetch raw arrivals for a station.

        Args:
            station_id: TfL StopPoint id (e.g., "940GZZLUWSD").

        Returns:
            List of arrival records as decoded JSON.

        Raises:
            RuntimeError: On a non-200 status or a payload that is not a list.
            aiohttp.ClientError: On transport errors.
            TimeoutError: When the request exceeds the timeout.
        """
        url = self.build_url(station_id)
        params: dict[str, str] = {}
        if self._app_key:
            params["app_key"] = self._app_key

        log_api_request("GET", url, params)

        async with self._session.get(url, params=params, timeout=self._timeout) as response:
            return await self._handle_arrivals_response(response, url)
