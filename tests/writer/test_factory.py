"""Test write sink factory functions."""

import pytest

from influxreporter.exceptions import ReporterConfigError
from influxreporter.writer import create_influx_write_sink, create_noop_write_sink
from influxreporter.writer.influx import InfluxWriteSink
from influxreporter.writer.noop import NoOpWriteSink


def test_create_noop_write_sink() -> None:
    """Test no-op write sink factory."""
    sink = create_noop_write_sink()

    assert isinstance(sink, NoOpWriteSink)


async def test_create_influx_write_sink() -> None:
    """Test InfluxDB write sink factory."""
    sink = create_influx_write_sink("http://localhost:8086", "token", "org", "bucket")

    assert isinstance(sink, InfluxWriteSink)
    assert str(sink.write_url) == "http://localhost:8086/api/v2/write"

    await sink.close()


@pytest.mark.parametrize(
    ("server_url", "org", "bucket"),
    [
        ("localhost:8086", "org", "bucket"),
        ("ftp://localhost", "org", "bucket"),
        ("http://", "org", "bucket"),
        ("http://localhost:8086", "", "bucket"),
        ("http://localhost:8086", "org", ""),
    ],
)
def test_create_influx_write_sink_invalid(
    server_url: str, org: str, bucket: str
) -> None:
    """Test invalid sink configuration."""
    with pytest.raises(ReporterConfigError):
        create_influx_write_sink(server_url, "token", org, bucket)
