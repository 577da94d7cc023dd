"""Scheduler driving the board: a slow poll timer and a fast tick timer."""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tfl_departures.domain.contracts.board_scheduler import BoardSchedulerProtocol
from tfl_departures.domain.models import ErrorDetails

if TYPE_CHECKING:
    from tfl_departures.domain.contracts import StateBroadcasterProtocol, StateUpdaterProtocol
    from tfl_departures.domain.models import BoardConfiguration, Departure
    from tfl_departures.domain.ports import ArrivalRepository

    from .departure_normalizer import DepartureNormalizer

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and error reason from exception."""
    error_str = str(error)
    # Format: "Bad API call: Got response (502) from ..."
    status_match = re.search(r"\((\d{3})\)", error_str)
    status_code = int(status_match.group(1)) if status_match else None

    if status_code == 429:
        reason = "Rate limit exceeded"
    elif status_code == 502:
        reason = "Bad gateway (server error)"
    elif status_code == 503:
        reason = "Service unavailable"
    elif status_code == 504:
        reason = "Gateway timeout"
    elif status_code is not None:
        reason = f"HTTP {status_code}"
    elif isinstance(error, TimeoutError):
        reason = "Request timed out"
    elif isinstance(error, ValueError):
        reason = "Malformed arrivals payload"
    else:
        reason = "Unknown error"

    return ErrorDetails(status_code=status_code, reason=reason)


class BoardScheduler(BoardSchedulerProtocol):
    """Owns the poll and tick timers of the board.

    The poll timer refreshes the departure list from the arrivals API; the tick
    timer only advances the shared reference instant so derived views are
    recomputed without network traffic. The two run as independent tasks.
    """

    def __init__(
        self,
        arrival_repository: ArrivalRepository,
        normalizer: DepartureNormalizer,
        config: BoardConfiguration,
        state_updater: StateUpdaterProtocol,
        state_broadcaster: StateBroadcasterProtocol,
        broadcast_topic: str,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            arrival_repository: Source of raw arrivals per station.
            normalizer: Turns both stations' raw arrivals into departures.
            config: Board configuration with stations and intervals.
            state_updater: Updater for the shared board state.
            state_broadcaster: Broadcaster for "update" and "tick" signals.
            broadcast_topic: The pub/sub topic to broadcast to.
            clock: Source of the current instant; defaults to UTC wall time.
        """
        self.arrival_repository = arrival_repository
        self.normalizer = normalizer
        self.config = config
        self.state_updater = state_updater
        self.state_broadcaster = state_broadcaster
        self.broadcast_topic = broadcast_topic
        self._clock = clock or _utc_now
        self._poll_task: asyncio.Task | None = None
        self._tick_task: asyncio.Task | None = None
        self._in_flight: set[asyncio.Task] = set()
        self._cycle = 0
        self._applied_cycle = 0

    @property
    def is_running(self) -> bool:
        return any(t is not None and not t.done() for t in (self._poll_task, self._tick_task))

    async def start(self) -> None:
        """Start the poll and tick timers."""
        if self.is_running:
            logger.warning("Board scheduler already running")
            return

        self.state_updater.update_now(self._clock())
        self._tick_task = asyncio.create_task(self._tick_loop())
        self._poll_task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started board scheduler (poll every {self.config.poll_interval_seconds}s, "
            f"tick every {self.config.tick_interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Cancel both timers and every poll still in flight."""
        tasks = [
            t for t in (self._tick_task, self._poll_task, *self._in_flight) if t and not t.done()
        ]
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._in_flight.clear()
        self._tick_task = None
        self._poll_task = None
        if tasks:
            logger.info(f"Stopped board scheduler ({len(tasks)} task(s) cancelled)")

    async def tick(self) -> None:
        """Advance the shared instant and signal subscribers to re-render."""
        now = self._clock()
        self.state_updater.update_now(now)
        await self.state_broadcaster.broadcast_update(self.broadcast_topic, "tick")

    async def poll_once(self, cycle: int | None = None) -> None:
        """Fetch both stations, normalize, and publish the new departure list.

        Any failure empties the list for this cycle; the next poll retries.
        Results from a cycle older than the last applied one are discarded.
        """
        if cycle is None:
            self._cycle += 1
            cycle = self._cycle

        departures: list[Departure]
        try:
            departures = await self._fetch_and_normalize()
            api_status = "success"
        except Exception as e:
            error_details = _extract_error_details(e)
            logger.error(
                f"Poll cycle {cycle} failed: {error_details.reason} "
                f"(status: {error_details.status_code}, error: {e})"
            )
            if error_details.status_code == 429:
                logger.warning("Rate limit (429) detected - consider a longer refresh interval")
            departures = []
            api_status = "error"

        if cycle < self._applied_cycle:
            logger.info(f"Discarding poll cycle {cycle}; cycle {self._applied_cycle} is newer")
            return
        self._applied_cycle = cycle

        self.state_updater.update_departures(departures)
        self.state_updater.update_last_update_time(self._clock())
        self.state_updater.update_api_status(api_status)
        logger.debug(f"Poll cycle {cycle} published {len(departures)} departures ({api_status})")

        await self.state_broadcaster.broadcast_update(self.broadcast_topic, "update")

    async def _fetch_and_normalize(self) -> list[Departure]:
        first, second = self.config.stations
        tasks = [
            asyncio.create_task(self.arrival_repository.get_arrivals(first.station_id)),
            asyncio.create_task(self.arrival_repository.get_arrivals(second.station_id)),
        ]
        try:
            first_results, second_results = await asyncio.gather(*tasks)
        except BaseException:
            # gather does not cancel the sibling request on failure
            for task in tasks:
                task.cancel()
            raise
        return self.normalizer.normalize(first_results, second_results)

    def _launch_poll(self) -> None:
        if self._in_flight:
            logger.warning(f"{len(self._in_flight)} poll cycle(s) still in flight, starting another")
        self._cycle += 1
        task = asyncio.create_task(self.poll_once(self._cycle))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _poll_loop(self) -> None:
        try:
            while True:
                self._launch_poll()
                await asyncio.sleep(self.config.poll_interval_seconds)
        except asyncio.CancelledError:
            logger.info("Board poll timer cancelled")
            raise

    async def _tick_loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.config.tick_interval_seconds)
                await self.tick()
        except asyncio.CancelledError:
            logger.debug("Board tick timer cancelled")
            raise
