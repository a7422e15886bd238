"""MeteoSwiss feed — typed client and scheduler for SwissMetNet open data."""

from meteoswiss._csv import iter_measurements, iter_stations, remove_trailing_lines
from meteoswiss._logging import configure_logging
from meteoswiss.client import MeteoSwissClient
from meteoswiss.config import PipelineConfig
from meteoswiss.exceptions import (
    DecodeError,
    FetchConnectionError,
    FetchError,
    FetchTimeoutError,
    MeteoSwissError,
    SchedulerError,
    StatusError,
    TransportError,
)
from meteoswiss.models import MeasuringPoint, MeasuringStation
from meteoswiss.pipeline import FetchJob, LatestResult, Snapshot, measurement_job, station_job
from meteoswiss.scheduler import Scheduler, SchedulerState, next_trigger_after

__all__ = [
    "DecodeError",
    "FetchConnectionError",
    "FetchError",
    "FetchJob",
    "FetchTimeoutError",
    "LatestResult",
    "MeasuringPoint",
    "MeasuringStation",
    "MeteoSwissClient",
    "MeteoSwissError",
    "PipelineConfig",
    "Scheduler",
    "SchedulerError",
    "SchedulerState",
    "Snapshot",
    "StatusError",
    "TransportError",
    "configure_logging",
    "iter_measurements",
    "iter_stations",
    "measurement_job",
    "next_trigger_after",
    "remove_trailing_lines",
    "station_job",
]

__version__ = "0.1.0"
