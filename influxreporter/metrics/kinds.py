"""Metric kinds understood by the reporter."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import Lock
import time

from ..const import METER_TICK_INTERVAL
from .base import Metric
from .ewma import EWMA
from .sample import Sample, UniformSample
from .snapshot import (
    CounterSnapshot,
    GaugeFloat64Snapshot,
    GaugeSnapshot,
    HistogramSnapshot,
    MeterSnapshot,
    TimerSnapshot,
)


class Counter(Metric):
    """Monotonic or up/down counter."""

    def __init__(self) -> None:
        """Initialize Counter."""
        self._count = 0
        self._lock = Lock()

    @property
    def count(self) -> int:
        """Return current count."""
        return self._count

    def inc(self, value: int = 1) -> None:
        """Increment the counter."""
        with self._lock:
            self._count += value

    def dec(self, value: int = 1) -> None:
        """Decrement the counter."""
        with self._lock:
            self._count -= value

    def clear(self) -> None:
        """Reset the counter to zero."""
        with self._lock:
            self._count = 0

    def snapshot(self) -> CounterSnapshot:
        """Return counter snapshot."""
        with self._lock:
            return CounterSnapshot(self._count)


class Gauge(Metric):
    """Gauge holding an int value."""

    def __init__(self, value: int = 0) -> None:
        """Initialize Gauge."""
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def update(self, value: int) -> None:
        """Set the gauge value."""
        self._value = int(value)

    def snapshot(self) -> GaugeSnapshot:
        return GaugeSnapshot(self._value)


class GaugeFloat64(Metric):
    """Gauge holding a float value."""

    def __init__(self, value: float = 0.0) -> None:
        """Initialize GaugeFloat64."""
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    def update(self, value: float) -> None:
        """Set the gauge value."""
        self._value = float(value)

    def snapshot(self) -> GaugeFloat64Snapshot:
        return GaugeFloat64Snapshot(self._value)


class Histogram(Metric):
    """Distribution of int values backed by a sample."""

    def __init__(self, sample: Sample | None = None) -> None:
        """Initialize Histogram."""
        self._sample = sample or UniformSample()
        self._count = 0
        self._lock = Lock()

    @property
    def count(self) -> int:
        """Return number of recorded values."""
        return self._count

    def update(self, value: int) -> None:
        """Record a value."""
        with self._lock:
            self._count += 1
            self._sample.update(value)

    def clear(self) -> None:
        """Drop all recorded values."""
        with self._lock:
            self._count = 0
            self._sample.clear()

    def snapshot(self) -> HistogramSnapshot:
        """Return histogram snapshot."""
        with self._lock:
            return HistogramSnapshot(self._count, self._sample.snapshot())


class Meter(Metric):
    """Rate of events with 1, 5 and 15 minute moving averages.

    The moving averages tick lazily whenever the meter is marked
    or read, so no background timer is needed.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize Meter."""
        self._clock = clock
        self._start = self._last_tick = clock()
        self._count = 0
        self._rates = (EWMA.one_minute(), EWMA.five_minutes(), EWMA.fifteen_minutes())
        self._lock = Lock()

    @property
    def count(self) -> int:
        """Return number of marked events."""
        return self._count

    def mark(self, count: int = 1) -> None:
        """Mark the occurrence of events."""
        with self._lock:
            self._tick_if_necessary()
            self._count += count
            for rate in self._rates:
                rate.update(count)

    def snapshot(self) -> MeterSnapshot:
        """Return meter snapshot."""
        with self._lock:
            self._tick_if_necessary()
            elapsed = self._clock() - self._start
            rate_mean = self._count / elapsed if elapsed > 0 else 0.0
            rate1, rate5, rate15 = (rate.rate for rate in self._rates)
            return MeterSnapshot(self._count, rate1, rate5, rate15, rate_mean)

    def _tick_if_necessary(self) -> None:
        ticks = int((self._clock() - self._last_tick) // METER_TICK_INTERVAL)
        if ticks <= 0:
            return
        self._last_tick += ticks * METER_TICK_INTERVAL
        for _ in range(ticks):
            for rate in self._rates:
                rate.tick()


class Timer(Metric):
    """Histogram of durations in nanoseconds plus a meter of events."""

    def __init__(
        self,
        sample: Sample | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize Timer."""
        self._histogram = Histogram(sample)
        self._meter = Meter(clock)

    @property
    def count(self) -> int:
        return self._histogram.count

    def update(self, duration_ns: int) -> None:
        """Record a duration in nanoseconds."""
        self._histogram.update(duration_ns)
        self._meter.mark()

    def update_since(self, start_ns: int) -> None:
        """Record the time elapsed since a time.perf_counter_ns() reading."""
        self.update(time.perf_counter_ns() - start_ns)

    @contextmanager
    def time(self) -> Iterator[None]:
        """Time the wrapped block."""
        start_ns = time.perf_counter_ns()
        try:
            yield
        finally:
            self.update_since(start_ns)

    def snapshot(self) -> TimerSnapshot:
        """Return timer snapshot."""
        return TimerSnapshot(self._histogram.snapshot(), self._meter.snapshot())
