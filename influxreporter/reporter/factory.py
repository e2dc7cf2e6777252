"""Factory functions for creating reporters."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta

from ..const import DEFAULT_MEASUREMENT
from ..metrics.base import MetricsRegistry
from ..writer.factory import create_influx_write_sink
from .core import Reporter


def create_reporter(
    registry: MetricsRegistry,
    server_url: str,
    token: str,
    org: str,
    bucket: str,
    interval: float | timedelta,
) -> Reporter:
    """
    Create a reporter writing to an InfluxDB 2.x server.

    Points use the default measurement, no extra tags and
    aligned timestamps.

    Raises:
        ReporterConfigError: The sink configuration or interval is invalid
    """
    return create_reporter_with_tags(
        registry,
        server_url,
        token,
        org,
        bucket,
        DEFAULT_MEASUREMENT,
        interval,
        {},
        True,
    )


def create_reporter_with_tags(
    registry: MetricsRegistry,
    server_url: str,
    token: str,
    org: str,
    bucket: str,
    measurement: str,
    interval: float | timedelta,
    tags: Mapping[str, str],
    align: bool,
) -> Reporter:
    """
    Create a reporter writing to an InfluxDB 2.x server.

    Args:
        registry: Registry to harvest
        server_url: Base URL of the server (e.g., 'http://localhost:8086')
        token: API token with write access to the bucket
        org: Organization owning the bucket
        bucket: Bucket receiving the points
        measurement: Measurement name of all points
        interval: Report interval in seconds or as timedelta
        tags: Tags added to every point
        align: Truncate timestamps down to a multiple of interval

    Raises:
        ReporterConfigError: The sink configuration or interval is invalid
    """
    sink = create_influx_write_sink(server_url, token, org, bucket)
    return Reporter(
        registry,
        sink,
        interval,
        measurement=measurement,
        tags=tags,
        align=align,
    )
