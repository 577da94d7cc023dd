"""Main entry point for the departure board application."""

import asyncio
import logging
import sys

import aiohttp

from tfl_departures.adapters.config import AppConfig, BoardConfigurationLoader
from tfl_departures.adapters.tfl_api import TflArrivalRepository
from tfl_departures.adapters.web import PyViewWebAdapter
from tfl_departures.adapters.web.broadcasters import StateBroadcaster
from tfl_departures.adapters.web.state import State
from tfl_departures.adapters.web.updaters import StateUpdater
from tfl_departures.application.services import (
    BoardScheduler,
    DepartureNormalizer,
    DepartureSuggestionService,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
        board_config = BoardConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid board configuration: {e}")
        sys.exit(1)

    async with aiohttp.ClientSession() as session:
        arrival_repo = TflArrivalRepository.from_config(session, config)
        suggestion_service = DepartureSuggestionService(board_config)

        state = State(route_path="/")
        scheduler = BoardScheduler(
            arrival_repository=arrival_repo,
            normalizer=DepartureNormalizer(board_config),
            config=board_config,
            state_updater=StateUpdater(state.board_state),
            state_broadcaster=StateBroadcaster(),
            broadcast_topic=state.broadcast_topic,
        )

        display_adapter = PyViewWebAdapter(suggestion_service, scheduler, state, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
