"""Test InfluxDB write sink."""

from unittest.mock import MagicMock

import aiohttp
import pytest

from influxreporter.exceptions import ReporterWriteError
from influxreporter.reporter import new_point
from influxreporter.writer.influx import InfluxWriteSink

from ..conftest import InfluxServer


def _sink(server: InfluxServer, **kwargs) -> InfluxWriteSink:
    return InfluxWriteSink(server.url, "secret", "my-org", "metrics", **kwargs)


async def test_flush_posts_line_protocol(influx_server: InfluxServer) -> None:
    """Test queued points are posted on flush."""
    sink = _sink(influx_server)
    sink.enqueue(new_point("reporter", {"env": "prod"}, {"requests": 42}, 10))
    sink.enqueue(new_point("reporter", {"bucket": "p99"}, {"latency": 1.5}, 10))
    assert sink.pending == 2
    assert not influx_server.requests

    await sink.flush()
    await sink.close()

    assert sink.pending == 0
    assert len(influx_server.requests) == 1
    request = influx_server.requests[0]
    assert request.query == {"org": "my-org", "bucket": "metrics", "precision": "ns"}
    assert request.headers["Authorization"] == "Token secret"
    assert request.body == (
        "reporter,env=prod requests=42i 10\nreporter,bucket=p99 latency=1.5 10"
    )


async def test_flush_nothing(influx_server: InfluxServer) -> None:
    """Test an empty flush does not touch the server."""
    sink = _sink(influx_server)
    sink.enqueue(new_point("reporter", {}, {"load": float("nan")}, 10))

    await sink.flush()
    await sink.close()

    assert not influx_server.requests


async def test_flush_in_batches(influx_server: InfluxServer) -> None:
    """Test large flushes are split into batches."""
    sink = _sink(influx_server, batch_size=2)
    for index in range(5):
        sink.enqueue(new_point("reporter", {}, {"requests": index}, 10))

    await sink.flush()
    await sink.close()

    assert [request.body.count("\n") + 1 for request in influx_server.requests] == [
        2,
        2,
        1,
    ]


async def test_flush_rejected(influx_server: InfluxServer) -> None:
    """Test a rejected write raises and drops the points."""
    influx_server.status = 401
    influx_server.message = "unauthorized access"
    sink = _sink(influx_server)
    sink.enqueue(new_point("reporter", {}, {"requests": 1}, 10))

    with pytest.raises(ReporterWriteError, match="401"):
        await sink.flush()

    assert sink.pending == 0
    influx_server.status = 204
    await sink.flush()
    await sink.close()
    assert len(influx_server.requests) == 1


async def test_flush_unreachable() -> None:
    """Test an unreachable server raises a write error."""
    sink = InfluxWriteSink("http://127.0.0.1:1", "secret", "my-org", "metrics")
    sink.enqueue(new_point("reporter", {}, {"requests": 1}, 10))

    with pytest.raises(ReporterWriteError):
        await sink.flush()

    await sink.close()


async def test_flush_timeout() -> None:
    """Test a timed out write raises a write error."""
    session = MagicMock(spec=aiohttp.ClientSession)
    session.post.side_effect = TimeoutError()
    sink = InfluxWriteSink(
        "http://localhost:8086",
        "secret",
        "my-org",
        "metrics",
        session=session,
    )
    sink.enqueue(new_point("reporter", {}, {"requests": 1}, 10))

    with pytest.raises(ReporterWriteError, match="timed out"):
        await sink.flush()


async def test_close_is_idempotent(influx_server: InfluxServer) -> None:
    """Test closing a sink twice."""
    sink = _sink(influx_server)
    sink.enqueue(new_point("reporter", {}, {"requests": 1}, 10))
    await sink.flush()

    await sink.close()
    await sink.close()


async def test_close_keeps_external_session(influx_server: InfluxServer) -> None:
    """Test a session passed in is left open for its owner."""
    async with aiohttp.ClientSession() as session:
        sink = _sink(influx_server, session=session)
        sink.enqueue(new_point("reporter", {}, {"requests": 1}, 10))
        await sink.flush()
        await sink.close()

        assert not session.closed

    assert len(influx_server.requests) == 1
