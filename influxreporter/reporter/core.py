"""Periodically report registry metrics to a time-series store."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from datetime import timedelta
import logging
import math
import time
from typing import TYPE_CHECKING

from ..const import DEFAULT_MEASUREMENT
from ..exceptions import ReporterConfigError, ReporterWriteError
from ..metrics.base import Metric, MetricsRegistry
from ..utils.asyncio import IntervalTicker, create_eager_task
from .fields import derive_points
from .point import Point

if TYPE_CHECKING:
    from ..writer.base import WriteSink

_LOGGER = logging.getLogger(__name__)


class Reporter:
    """Harvest a metrics registry into points on a fixed interval."""

    def __init__(
        self,
        registry: MetricsRegistry,
        sink: WriteSink,
        interval: float | timedelta,
        *,
        measurement: str | None = None,
        tags: Mapping[str, str] | None = None,
        align: bool = True,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        """Initialize Reporter.

        Args:
            registry: Registry to harvest, shared with the producers
            sink: Sink receiving one batch of points per cycle
            interval: Report interval in seconds or as timedelta
            measurement: Measurement name of all points
            tags: Tags added to every point
            align: Truncate timestamps down to a multiple of interval
            clock: Wall clock in nanoseconds since the Unix epoch
        """
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if not math.isfinite(interval) or interval <= 0:
            raise ReporterConfigError(f"Invalid report interval: {interval}")

        self._registry = registry
        self._sink = sink
        self._interval: float = float(interval)
        self._interval_ns: int = round(interval * 1_000_000_000)
        self._measurement: str = measurement or DEFAULT_MEASUREMENT
        self._tags: dict[str, str] = dict(tags or {})
        self._align = align
        self._clock = clock
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task[None] | None = None

    @property
    def interval(self) -> float:
        """Return report interval in seconds."""
        return self._interval

    @property
    def measurement(self) -> str:
        return self._measurement

    @property
    def tags(self) -> dict[str, str]:
        """Return a copy of the base tags."""
        return dict(self._tags)

    @property
    def align(self) -> bool:
        return self._align

    @property
    def is_running(self) -> bool:
        """Return True if the report loop task is active."""
        return self._task is not None and not self._task.done()

    def timestamp(self) -> int:
        """Return the timestamp for a cycle starting now."""
        now = self._clock()
        if self._align:
            now -= now % self._interval_ns
        return now

    def collect(self, time_ns: int) -> list[Point]:
        """Return the points of all registered metrics."""
        points: list[Point] = []
        for name, metric in self._registry:
            if not isinstance(metric, Metric):
                _LOGGER.debug("Skip metric %s of unknown kind %s", name, type(metric))
                continue
            points.extend(
                derive_points(
                    self._measurement,
                    name,
                    metric.snapshot(),
                    self._tags,
                    time_ns,
                ),
            )
        return points

    async def send(self) -> int:
        """Run one report cycle.

        Return the number of points written.
        """
        points = self.collect(self.timestamp())
        for point in points:
            self._sink.enqueue(point)
        await self._sink.flush()

        _LOGGER.debug("Reported %d points", len(points))
        return len(points)

    async def run(self) -> None:
        """Report on every tick until stop is called."""
        self._stop_event.clear()
        ticker = IntervalTicker(self._interval)
        _LOGGER.info("Report metrics every %s seconds", self._interval)

        while await ticker.wait(self._stop_event):
            try:
                await self.send()
            except ReporterWriteError as err:
                _LOGGER.warning("Unable to send metrics to InfluxDB: %s", err)
            except Exception:
                _LOGGER.exception("Unexpected error while reporting metrics")

        _LOGGER.info("Metrics reporting stopped")

    def start(self) -> asyncio.Task[None]:
        """Start the report loop as a task."""
        if self.is_running:
            raise RuntimeError("Reporter is already running")
        self._task = create_eager_task(self.run(), name="influxreporter")
        return self._task

    async def stop(self) -> None:
        """Stop the report loop.

        A cycle in flight is completed first.
        """
        self._stop_event.set()
        if self._task is None:
            return
        task, self._task = self._task, None
        await task

    async def close(self) -> None:
        """Release the write sink."""
        await self._sink.close()
