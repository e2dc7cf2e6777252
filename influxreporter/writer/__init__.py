"""Write sinks delivering points to a time-series store."""

from .base import WriteSink
from .factory import create_influx_write_sink, create_noop_write_sink
from .influx import InfluxWriteSink
from .noop import NoOpWriteSink

__all__ = [
    "InfluxWriteSink",
    "NoOpWriteSink",
    "WriteSink",
    "create_influx_write_sink",
    "create_noop_write_sink",
]
