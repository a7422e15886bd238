"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from meteoswiss._http import DEFAULT_ENCODING, DEFAULT_TIMEOUT

DEFAULT_STATIONS_URL = (
    "https://data.geo.admin.ch/ch.meteoschweiz.messnetz-automatisch/"
    "ch.meteoschweiz.messnetz-automatisch_en.csv"
)
DEFAULT_MEASUREMENTS_URL = (
    "https://data.geo.admin.ch/ch.meteoschweiz.messwerte-aktuell/VQHA80.csv"
)
DEFAULT_INTERVAL = timedelta(minutes=10)
DEFAULT_TIMEZONE = "Europe/Zurich"
DEFAULT_POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class PipelineConfig:
    """Everything needed to build a client and a scheduler.

    Usage:
        config = PipelineConfig(interval=timedelta(minutes=5))
        client = MeteoSwissClient.from_config(config)
    """

    stations_url: str = DEFAULT_STATIONS_URL
    measurements_url: str = DEFAULT_MEASUREMENTS_URL
    timeout: float = DEFAULT_TIMEOUT
    encoding: str = DEFAULT_ENCODING
    interval: timedelta = DEFAULT_INTERVAL
    timezone: str = DEFAULT_TIMEZONE
    poll_interval: float = DEFAULT_POLL_INTERVAL

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.interval <= timedelta(0):
            raise ValueError(f"interval must be positive, got {self.interval}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {self.poll_interval}")
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone}") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)
