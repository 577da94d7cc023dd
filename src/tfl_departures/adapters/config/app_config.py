"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # TfL API configuration
    tfl_api_url_template: str = Field(
        default="https://api.tfl.gov.uk/StopPoint/{station_id}/arrivals",
        description="Arrivals endpoint, with {station_id} as the placeholder",
    )
    tfl_app_key: str | None = Field(
        default=None, description="Optional TfL app_key for higher rate limits"
    )
    tfl_api_timeout: int = Field(default=10, description="Timeout for TfL API requests in seconds")

    # Monitored stations
    first_station_id: str = Field(default="940GZZLUWSD", description="StopPoint id (Wanstead)")
    first_station_direction: str = Field(
        default="Westbound - Platform 1",
        description="platformName to keep at the first station",
    )
    second_station_id: str = Field(
        default="940GZZLUSNB", description="StopPoint id (Snaresbrook)"
    )
    second_station_direction: str = Field(
        default="Outer Rail - Platform 1",
        description="platformName to keep at the second station",
    )
    station_name_suffix: str = Field(
        default=" Underground Station",
        description="Suffix stripped from station and destination names",
    )

    # Time bands
    gettable_min_seconds: int = Field(
        default=300, description="Below this many seconds a train is too soon to catch"
    )
    gettable_max_seconds: int = Field(
        default=480, description="Above this many seconds a train is far away"
    )

    # Timers
    refresh_interval_seconds: int = Field(
        default=30, description="Interval between arrival polls in seconds"
    )
    tick_interval_seconds: float = Field(
        default=1.0, description="Interval between countdown refreshes in seconds"
    )

    # Display configuration
    timezone: str = Field(
        default="Europe/London",
        description="Timezone for displaying the last update time (IANA timezone name)",
    )
    title: str = Field(
        default="Wanstead & Snaresbrook Departure Board",
        description="Page title displayed in browser tab and heading",
    )
    theme: str = Field(
        default="light",
        description="UI theme: 'light', 'dark', or 'auto' (follows system preference)",
    )

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Optional TOML file with [display], [[stations]] and [thresholds] sections",
    )

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        """Validate theme is either 'light', 'dark', or 'auto'."""
        if v.lower() not in ("light", "dark", "auto"):
            raise ValueError("theme must be either 'light', 'dark', or 'auto'")
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @model_validator(mode="after")
    def validate_thresholds(self) -> "AppConfig":
        """Validate that the gettable window is not inverted."""
        if self.gettable_min_seconds > self.gettable_max_seconds:
            raise ValueError("gettable_min_seconds must not exceed gettable_max_seconds")
        return self

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file, updating display and threshold settings."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        display = toml_data.get("display", {})
        thresholds = toml_data.get("thresholds", {})
        overrides: dict[str, Any] = {
            key: display[key]
            for key in (
                "title",
                "theme",
                "timezone",
                "refresh_interval_seconds",
                "tick_interval_seconds",
            )
            if key in display
        }
        overrides.update(
            {
                key: thresholds[key]
                for key in ("gettable_min_seconds", "gettable_max_seconds")
                if key in thresholds
            }
        )
        if "station_name_suffix" in toml_data:
            overrides["station_name_suffix"] = toml_data["station_name_suffix"]

        if overrides:
            # Run field and cross-field validators over the merged values
            validated = type(self).model_validate({**self.model_dump(), **overrides})
            for key in overrides:
                setattr(self, key, getattr(validated, key))

        return toml_data

    def get_stations_config(self) -> list[dict[str, str]]:
        """Return the two monitored stations as dicts with station_id and direction_label.

        A [[stations]] list in the TOML file replaces the environment settings
        and must contain exactly two entries.
        """
        toml_data = self._load_toml_data()

        stations = toml_data.get("stations")
        if stations is None:
            return [
                {
                    "station_id": self.first_station_id,
                    "direction_label": self.first_station_direction,
                },
                {
                    "station_id": self.second_station_id,
                    "direction_label": self.second_station_direction,
                },
            ]

        if not isinstance(stations, list):
            raise ValueError("TOML config 'stations' must be a list")
        if len(stations) != 2:
            raise ValueError(f"TOML config must define exactly two stations, got {len(stations)}")
        for station in stations:
            if not isinstance(station, dict):
                raise ValueError("Each station must be a table")
            if not station.get("station_id") or not station.get("direction_label"):
                raise ValueError("Each station needs 'station_id' and 'direction_label'")
        return [
            {"station_id": str(s["station_id"]), "direction_label": str(s["direction_label"])}
            for s in stations
        ]
