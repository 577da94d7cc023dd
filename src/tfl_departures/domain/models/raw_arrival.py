"""Raw arrival record as returned by the TfL arrivals endpoint."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawArrival(BaseModel):
    """A single predicted arrival at a stop point.

    Only the fields the board depends on are declared; anything else in the
    payload is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    station_name: str = Field(alias="stationName")
    destination_name: str = Field(alias="destinationName")
    time_to_station: int = Field(alias="timeToStation")
    platform_name: str = Field(alias="platformName")
    expected_arrival: datetime = Field(alias="expectedArrival")

    @field_validator("expected_arrival")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v
