"""Report in-process metrics to InfluxDB."""

from .exceptions import ReporterConfigError, ReporterError, ReporterWriteError
from .metrics import Registry
from .reporter import Reporter, create_reporter, create_reporter_with_tags
from .writer import InfluxWriteSink, NoOpWriteSink, WriteSink

__all__ = [
    "InfluxWriteSink",
    "NoOpWriteSink",
    "Registry",
    "Reporter",
    "ReporterConfigError",
    "ReporterError",
    "ReporterWriteError",
    "WriteSink",
    "create_reporter",
    "create_reporter_with_tags",
]
