"""Public client class for the MeteoSwiss open-data feed."""

from __future__ import annotations

from meteoswiss._csv import (
    STATION_TRAILING_LINES,
    iter_measurements,
    iter_stations,
    remove_trailing_lines,
)
from meteoswiss._http import DEFAULT_ENCODING, DEFAULT_TIMEOUT, SyncTransport
from meteoswiss._logging import log_fetch
from meteoswiss.config import DEFAULT_MEASUREMENTS_URL, DEFAULT_STATIONS_URL, PipelineConfig
from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation


class MeteoSwissClient:
    """Blocking client for the SwissMetNet station list and current readings.

    Each fetch either returns every decoded record or raises a
    :class:`~meteoswiss.exceptions.FetchError`; no partial lists, no retries.

    Usage:
        with MeteoSwissClient() as client:
            stations = client.fetch_stations()
            points = client.fetch_measurements()
    """

    def __init__(
        self,
        stations_url: str = DEFAULT_STATIONS_URL,
        measurements_url: str = DEFAULT_MEASUREMENTS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.stations_url = stations_url
        self.measurements_url = measurements_url
        self._transport = SyncTransport(timeout=timeout, encoding=encoding)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> MeteoSwissClient:
        return cls(
            stations_url=config.stations_url,
            measurements_url=config.measurements_url,
            timeout=config.timeout,
            encoding=config.encoding,
        )

    def __enter__(self) -> MeteoSwissClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_fetch
    def fetch_stations(self, url: str | None = None) -> list[MeasuringStation]:
        """Get the station list, dropping the feed's trailing legend lines."""
        text = self._transport.get_text(url or self.stations_url)
        text = remove_trailing_lines(text, STATION_TRAILING_LINES)
        return list(iter_stations(text))

    @log_fetch
    def fetch_measurements(self, url: str | None = None) -> list[MeasuringPoint]:
        """Get the latest 10-minute readings of every station."""
        text = self._transport.get_text(url or self.measurements_url)
        return list(iter_measurements(text))
