"""Test no-op write sink."""

from influxreporter.reporter import new_point
from influxreporter.writer.noop import NoOpWriteSink


async def test_noop_sink_has_no_overhead() -> None:
    """Test that NoOp sink truly does nothing."""
    sink = NoOpWriteSink()

    sink.enqueue(new_point("reporter", {}, {"requests": 1}, 1))
    await sink.flush()
    await sink.close()
    await sink.close()

    assert not hasattr(sink, "_buffer")
    assert not hasattr(sink, "_session")
