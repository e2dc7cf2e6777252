"""In-process metrics harvested by the reporter."""

from .base import Metric, MetricsRegistry
from .kinds import Counter, Gauge, GaugeFloat64, Histogram, Meter, Timer
from .registry import Registry
from .sample import Sample, UniformSample
from .snapshot import (
    CounterSnapshot,
    GaugeFloat64Snapshot,
    GaugeSnapshot,
    HistogramSnapshot,
    MeterSnapshot,
    MetricSnapshot,
    SampleStats,
    TimerSnapshot,
)

__all__ = [
    "Counter",
    "CounterSnapshot",
    "Gauge",
    "GaugeFloat64",
    "GaugeFloat64Snapshot",
    "GaugeSnapshot",
    "Histogram",
    "HistogramSnapshot",
    "Meter",
    "MeterSnapshot",
    "Metric",
    "MetricSnapshot",
    "MetricsRegistry",
    "Registry",
    "Sample",
    "SampleStats",
    "Timer",
    "TimerSnapshot",
    "UniformSample",
]
