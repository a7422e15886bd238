"""Interval ticker running a callback on wall-clock boundaries."""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Callable
from zoneinfo import ZoneInfo

from meteoswiss._logging import get_logger
from meteoswiss.config import (
    DEFAULT_INTERVAL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_TIMEZONE,
    PipelineConfig,
)
from meteoswiss.exceptions import SchedulerError

logger = get_logger("scheduler")

Clock = Callable[[], datetime]

_MAX_DST_SHIFT = timedelta(hours=1)


class SchedulerState(str, Enum):
    """Lifecycle of a :class:`Scheduler`."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


def next_trigger_after(moment: datetime, interval: timedelta, tz: ZoneInfo) -> datetime:
    """Return the first boundary strictly after ``moment``.

    Boundaries are wall-clock multiples of ``interval`` counted from local
    midnight in ``tz``; with a 10 minute interval they fall on :00, :10, ...
    Wall times repeated after a fall-back transition yield a boundary on
    each pass; wall times skipped by a spring-forward gap are shifted forward
    by the length of the gap.
    """
    if interval <= timedelta(0):
        raise ValueError(f"interval must be positive, got {interval}")
    after = moment.astimezone(UTC)
    local = moment.astimezone(tz).replace(tzinfo=None)
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    first = (local - midnight) // interval + 1
    # Start early enough to see boundaries of a repeated hour
    lookback = -(-_MAX_DST_SHIFT // interval)
    step = max(first - lookback, 0)
    best: datetime | None = None
    while best is None or step <= first:
        boundary = midnight + step * interval
        for fold in (0, 1):
            instant = boundary.replace(tzinfo=tz, fold=fold).astimezone(UTC)
            if instant > after and (best is None or instant < best):
                best = instant
        step += 1
    return best.astimezone(tz)


class Scheduler:
    """Run ``callback`` on every interval boundary in a background thread.

    The scheduler itself is the handle returned by :meth:`start`; :meth:`stop`
    is the only way to tear it down. A stopped scheduler cannot be restarted.

    Usage:
        scheduler = Scheduler(job, interval=timedelta(minutes=10)).start()
        ...
        scheduler.stop()

        # Or as a context manager:
        with Scheduler(job).start():
            serve_forever()
    """

    def __init__(
        self,
        callback: Callable[[], object],
        interval: timedelta = DEFAULT_INTERVAL,
        timezone: str = DEFAULT_TIMEZONE,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Clock | None = None,
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError(f"interval must be positive, got {interval}")
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        self._callback = callback
        self.interval = interval
        self.tz = ZoneInfo(timezone)
        self.poll_interval = poll_interval
        self._clock = clock or (lambda: datetime.now(self.tz))

        self._state = SchedulerState.IDLE
        self._state_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.tick_count = 0
        self.next_trigger: datetime | None = None

    @classmethod
    def from_config(
        cls,
        callback: Callable[[], object],
        config: PipelineConfig,
        clock: Clock | None = None,
    ) -> Scheduler:
        return cls(
            callback,
            interval=config.interval,
            timezone=config.timezone,
            poll_interval=config.poll_interval,
            clock=clock,
        )

    @property
    def state(self) -> SchedulerState:
        return self._state

    def __enter__(self) -> Scheduler:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def start(self) -> Scheduler:
        """Spawn the ticker thread and return this scheduler as its handle."""
        with self._state_lock:
            if self._state is not SchedulerState.IDLE:
                raise SchedulerError(f"Cannot start a scheduler that is {self._state.value}")
            self.next_trigger = next_trigger_after(self._clock(), self.interval, self.tz)
            self._thread = threading.Thread(
                target=self._run, name="meteoswiss-scheduler", daemon=True,
            )
            self._state = SchedulerState.RUNNING
            self._thread.start()
        logger.info(
            "Scheduler started: every %s in %s, first tick at %s",
            self.interval, self.tz.key, self.next_trigger.isoformat(),
        )
        return self

    def stop(self) -> None:
        """Signal the ticker thread and block until it has exited."""
        with self._state_lock:
            if self._state is SchedulerState.STOPPED:
                return
            if self._state is SchedulerState.IDLE:
                self._state = SchedulerState.STOPPED
                return
            if threading.current_thread() is self._thread:
                raise SchedulerError("Cannot stop the scheduler from inside its own tick")
            self._state = SchedulerState.STOPPING
            self._stop_event.set()
            thread = self._thread

        if thread is not None:
            thread.join()
        with self._state_lock:
            self._state = SchedulerState.STOPPED
        logger.info("Scheduler stopped after %d ticks", self.tick_count)

    def _run(self) -> None:
        while not self._stop_event.wait(self.poll_interval):
            now = self._clock().astimezone(UTC)
            due = self.next_trigger
            if due is None or now < due.astimezone(UTC):
                continue

            skipped = (now - due.astimezone(UTC)) // self.interval
            if skipped:
                logger.warning(
                    "Tick due at %s is late, %d boundaries skipped", due.isoformat(), skipped,
                )
            self._tick()
            self.next_trigger = next_trigger_after(now, self.interval, self.tz)

    def _tick(self) -> None:
        self.tick_count += 1
        try:
            self._callback()
        except Exception:
            logger.exception("Tick %d failed", self.tick_count)
