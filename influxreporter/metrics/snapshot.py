"""Immutable metric snapshots.

Every metric kind has exactly one snapshot type. The set of
snapshot types is closed: the reporter only knows how to turn
these into points and skips anything else.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math


@dataclass(frozen=True, slots=True)
class CounterSnapshot:
    """Counter snapshot."""

    count: int


@dataclass(frozen=True, slots=True)
class GaugeSnapshot:
    """Integer gauge snapshot."""

    value: int


@dataclass(frozen=True, slots=True)
class GaugeFloat64Snapshot:
    """Float gauge snapshot."""

    value: float


@dataclass(frozen=True, slots=True)
class SampleStats:
    """Statistics over a sorted sample of values.

    values: the sampled values in ascending order.
    """

    values: tuple[int, ...] = ()

    @classmethod
    def from_values(cls, values: Sequence[int]) -> SampleStats:
        """Build stats from an unsorted sequence of values."""
        return cls(tuple(sorted(values)))

    @property
    def min(self) -> int:
        """Return the smallest sampled value."""
        return self.values[0] if self.values else 0

    @property
    def max(self) -> int:
        """Return the largest sampled value."""
        return self.values[-1] if self.values else 0

    @property
    def mean(self) -> float:
        """Return the arithmetic mean of the sample."""
        if not self.values:
            return 0.0
        return sum(self.values) / len(self.values)

    @property
    def variance(self) -> float:
        """Return the population variance of the sample."""
        if not self.values:
            return 0.0
        mean = self.mean
        return sum((value - mean) ** 2 for value in self.values) / len(self.values)

    @property
    def stddev(self) -> float:
        """Return the population standard deviation of the sample."""
        return math.sqrt(self.variance)

    def percentiles(self, quantiles: Sequence[float]) -> list[float]:
        """Return the values at the given quantiles, in the same order."""
        return [self._percentile(quantile) for quantile in quantiles]

    def _percentile(self, quantile: float) -> float:
        size = len(self.values)
        if not size:
            return 0.0
        pos = quantile * (size + 1)
        if pos < 1:
            return float(self.values[0])
        if pos >= size:
            return float(self.values[-1])
        lower = self.values[int(pos) - 1]
        upper = self.values[int(pos)]
        return lower + (pos - math.floor(pos)) * (upper - lower)


@dataclass(frozen=True, slots=True)
class HistogramSnapshot:
    """Histogram snapshot.

    count is the total number of updates, the statistics are
    computed over the retained sample.
    """

    count: int
    sample: SampleStats

    @property
    def min(self) -> int:
        """Return the smallest sampled value."""
        return self.sample.min

    @property
    def max(self) -> int:
        """Return the largest sampled value."""
        return self.sample.max

    @property
    def mean(self) -> float:
        """Return the mean of the sample."""
        return self.sample.mean

    @property
    def stddev(self) -> float:
        """Return the standard deviation of the sample."""
        return self.sample.stddev

    @property
    def variance(self) -> float:
        """Return the variance of the sample."""
        return self.sample.variance

    def percentiles(self, quantiles: Sequence[float]) -> list[float]:
        """Return the values at the given quantiles, in the same order."""
        return self.sample.percentiles(quantiles)


@dataclass(frozen=True, slots=True)
class MeterSnapshot:
    """Meter snapshot, rates are events per second."""

    count: int
    rate1: float
    rate5: float
    rate15: float
    rate_mean: float


@dataclass(frozen=True, slots=True)
class TimerSnapshot:
    """Timer snapshot, a histogram of durations plus a meter of events."""

    histogram: HistogramSnapshot
    meter: MeterSnapshot

    @property
    def count(self) -> int:
        """Return the number of timed events."""
        return self.histogram.count

    @property
    def min(self) -> int:
        return self.histogram.min

    @property
    def max(self) -> int:
        return self.histogram.max

    @property
    def mean(self) -> float:
        return self.histogram.mean

    @property
    def stddev(self) -> float:
        return self.histogram.stddev

    @property
    def variance(self) -> float:
        return self.histogram.variance

    def percentiles(self, quantiles: Sequence[float]) -> list[float]:
        """Return the durations at the given quantiles, in the same order."""
        return self.histogram.percentiles(quantiles)

    @property
    def rate1(self) -> float:
        return self.meter.rate1

    @property
    def rate5(self) -> float:
        return self.meter.rate5

    @property
    def rate15(self) -> float:
        return self.meter.rate15

    @property
    def rate_mean(self) -> float:
        return self.meter.rate_mean


MetricSnapshot = (
    CounterSnapshot
    | GaugeSnapshot
    | GaugeFloat64Snapshot
    | HistogramSnapshot
    | MeterSnapshot
    | TimerSnapshot
)
