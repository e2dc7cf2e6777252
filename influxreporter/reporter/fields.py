"""Turn metric snapshots into points."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from ..const import PERCENTILE_LABELS, PERCENTILES
from ..metrics.snapshot import (
    CounterSnapshot,
    GaugeFloat64Snapshot,
    GaugeSnapshot,
    HistogramSnapshot,
    MeterSnapshot,
    TimerSnapshot,
)
from .point import Point, bucket_tags, new_point

_LOGGER = logging.getLogger(__name__)


def histogram_stats(snapshot: HistogramSnapshot | TimerSnapshot) -> dict[str, float]:
    """Return the distribution statistics of a histogram or timer."""
    stats = {
        "count": float(snapshot.count),
        "max": float(snapshot.max),
        "mean": snapshot.mean,
        "min": float(snapshot.min),
        "stddev": snapshot.stddev,
        "variance": snapshot.variance,
    }
    stats.update(zip(PERCENTILE_LABELS, snapshot.percentiles(PERCENTILES)))
    return stats


def meter_stats(snapshot: MeterSnapshot) -> dict[str, float]:
    """Return the rate statistics of a meter."""
    return {
        "count": float(snapshot.count),
        "m1": snapshot.rate1,
        "m5": snapshot.rate5,
        "m15": snapshot.rate15,
        "mean": snapshot.rate_mean,
    }


def timer_stats(snapshot: TimerSnapshot) -> dict[str, float]:
    """Return distribution and rate statistics of a timer."""
    stats = histogram_stats(snapshot)
    stats.update(
        {
            "m1": snapshot.rate1,
            "m5": snapshot.rate5,
            "m15": snapshot.rate15,
            "meanrate": snapshot.rate_mean,
        },
    )
    return stats


def derive_points(
    measurement: str,
    name: str,
    snapshot: Any,
    tags: Mapping[str, str],
    time_ns: int,
) -> list[Point]:
    """Return the points representing one metric snapshot.

    Single value kinds yield one point tagged with tags. Distribution
    and rate kinds yield one point per statistic, each tagged with
    tags plus a bucket tag naming the statistic. Every point carries
    the single field name. Unknown snapshots yield no points.
    """
    match snapshot:
        case CounterSnapshot(count=count):
            return [new_point(measurement, tags, {name: count}, time_ns)]
        case GaugeSnapshot(value=value) | GaugeFloat64Snapshot(value=value):
            return [new_point(measurement, tags, {name: value}, time_ns)]
        case HistogramSnapshot():
            stats = histogram_stats(snapshot)
        case MeterSnapshot():
            stats = meter_stats(snapshot)
        case TimerSnapshot():
            stats = timer_stats(snapshot)
        case _:
            _LOGGER.debug("Skip metric %s of unknown kind %s", name, type(snapshot))
            return []

    return [
        new_point(measurement, bucket_tags(label, tags), {name: value}, time_ns)
        for label, value in stats.items()
    ]
