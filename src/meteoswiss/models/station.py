"""Measuring station metadata model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MeasuringStation(BaseModel):
    """One row of the SwissMetNet station list."""

    model_config = ConfigDict(frozen=True)

    name: str
    abbreviation: str
    station_type: str
    height: int
    barometric_altitude: int | None = None
    latitude: float
    longitude: float
    canton: str
    measurements: str

    @property
    def has_barometer(self) -> bool:
        """True when the station reports a barometric altitude."""
        return self.barometric_altitude is not None
