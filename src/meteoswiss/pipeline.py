"""Tick jobs that fetch records and hand them to a consumer-supplied sink."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Callable, Generic, TypeVar

from meteoswiss._logging import get_logger
from meteoswiss.client import MeteoSwissClient
from meteoswiss.exceptions import FetchError
from meteoswiss.models.measuring_point import MeasuringPoint
from meteoswiss.models.station import MeasuringStation

logger = get_logger("pipeline")

T = TypeVar("T")


@dataclass(frozen=True)
class Snapshot(Generic[T]):
    """Immutable view of the latest fetch outcome."""

    records: tuple[T, ...] = ()
    fetched_at: datetime | None = None
    error: FetchError | None = None
    failed_at: datetime | None = None

    @property
    def is_empty(self) -> bool:
        return self.fetched_at is None


class LatestResult(Generic[T]):
    """Thread-safe holder of the most recent successful fetch and last error.

    A failed fetch never clears the previous records.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Snapshot[T] = Snapshot()

    def update(self, records: Sequence[T]) -> None:
        with self._lock:
            self._snapshot = Snapshot(
                records=tuple(records),
                fetched_at=datetime.now(UTC),
                error=self._snapshot.error,
                failed_at=self._snapshot.failed_at,
            )

    def record_error(self, error: FetchError) -> None:
        with self._lock:
            self._snapshot = Snapshot(
                records=self._snapshot.records,
                fetched_at=self._snapshot.fetched_at,
                error=error,
                failed_at=datetime.now(UTC),
            )

    def snapshot(self) -> Snapshot[T]:
        with self._lock:
            return self._snapshot


class FetchJob(Generic[T]):
    """Scheduler callback: fetch, then forward the records or the failure.

    :class:`FetchError` is logged and passed to ``on_error``; it never escapes
    the job. An invocation that finds the previous one still running is
    skipped instead of fetching concurrently.
    """

    def __init__(
        self,
        fetch: Callable[[], list[T]],
        on_result: Callable[[list[T]], object],
        on_error: Callable[[FetchError], object] | None = None,
        name: str = "fetch",
    ) -> None:
        self._fetch = fetch
        self._on_result = on_result
        self._on_error = on_error
        self.name = name
        self._running = threading.Lock()

    def __call__(self) -> bool:
        """Run one fetch; return True when records were delivered."""
        if not self._running.acquire(blocking=False):
            logger.warning("%s: previous run still in progress, skipping", self.name)
            return False
        try:
            try:
                records = self._fetch()
            except FetchError as exc:
                logger.error("%s: %s: %s", self.name, type(exc).__name__, exc)
                if self._on_error is not None:
                    self._on_error(exc)
                return False
            logger.info("%s: %d records", self.name, len(records))
            self._on_result(records)
            return True
        finally:
            self._running.release()


def measurement_job(
    client: MeteoSwissClient,
    sink: LatestResult[MeasuringPoint],
) -> FetchJob[MeasuringPoint]:
    """Build a job that keeps ``sink`` filled with the latest readings."""
    return FetchJob(
        client.fetch_measurements,
        on_result=sink.update,
        on_error=sink.record_error,
        name="measurements",
    )


def station_job(
    client: MeteoSwissClient,
    sink: LatestResult[MeasuringStation],
) -> FetchJob[MeasuringStation]:
    """Build a job that keeps ``sink`` filled with the station list."""
    return FetchJob(
        client.fetch_stations,
        on_result=sink.update,
        on_error=sink.record_error,
        name="stations",
    )
