"""Configuration adapters."""

from tfl_departures.adapters.config.app_config import AppConfig
from tfl_departures.adapters.config.board_configuration_loader import BoardConfigurationLoader

__all__ = ["AppConfig", "BoardConfigurationLoader"]
