"""Board configuration loader."""

import logging

from tfl_departures.adapters.config.app_config import AppConfig
from tfl_departures.domain.models import BoardConfiguration, StationConfiguration

logger = logging.getLogger(__name__)


class BoardConfigurationLoader:
    """Loads the board configuration from app config."""

    @staticmethod
    def load(config: AppConfig) -> BoardConfiguration:
        """Load the board configuration from app config.

        Raises:
            ValueError: If the stations or thresholds are invalid.
            FileNotFoundError: If a configured TOML file does not exist.
        """
        stations_data = config.get_stations_config()
        first, second = (
            StationConfiguration(
                station_id=s["station_id"],
                direction_label=s["direction_label"],
            )
            for s in stations_data
        )

        board_config = BoardConfiguration(
            stations=(first, second),
            station_name_suffix=config.station_name_suffix,
            gettable_min_seconds=config.gettable_min_seconds,
            gettable_max_seconds=config.gettable_max_seconds,
            poll_interval_seconds=config.refresh_interval_seconds,
            tick_interval_seconds=config.tick_interval_seconds,
        )
        logger.info(
            f"Monitoring {first.station_id} ('{first.direction_label}') and "
            f"{second.station_id} ('{second.direction_label}')"
        )
        return board_config
