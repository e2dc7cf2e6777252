"""Factory functions for creating write sinks."""

from .base import WriteSink
from .influx import InfluxWriteSink
from .noop import NoOpWriteSink


def create_influx_write_sink(
    server_url: str,
    token: str,
    org: str,
    bucket: str,
) -> WriteSink:
    """
    Create a write sink for an InfluxDB 2.x server.

    Args:
        server_url: Base URL of the server (e.g., 'http://localhost:8086')
        token: API token with write access to the bucket
        org: Organization owning the bucket
        bucket: Bucket receiving the points

    Returns:
        InfluxWriteSink instance.

    Raises:
        ReporterConfigError: The URL, organization or bucket is invalid
    """
    return InfluxWriteSink(server_url, token, org, bucket)


def create_noop_write_sink() -> WriteSink:
    """
    Create a no-op write sink for disabled reporting.

    Returns:
        NoOpWriteSink instance that does nothing.
    """
    return NoOpWriteSink()
