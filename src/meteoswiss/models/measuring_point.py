"""10-minute measurement model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MeasuringPoint(BaseModel):
    """Readings of one station at one timestamp.

    ``datetime`` is kept as the raw ``yyyyMMddHHmm`` token from the feed.
    Every sensor reading is ``None`` when the sensor is not installed or the
    value is flagged invalid.
    """

    model_config = ConfigDict(frozen=True)

    station: str
    datetime: str
    temperature: float | None = None
    precipitation: float | None = None
    sunshine: float | None = None
    radiation: float | None = None
    humidity: float | None = None
    dew_point: float | None = None
    wind_direction: float | None = None
    wind_speed: float | None = None
    wind_gust_peak: float | None = None
    pressure: float | None = None
    pressure_at_sea_level: float | None = None
