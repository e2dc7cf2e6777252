"""InfluxReporter Exceptions."""


class ReporterError(Exception):
    """Base Exception for InfluxReporter exceptions."""


class ReporterConfigError(ReporterError):
    """Raise if the reporter or sink configuration is invalid."""


class ReporterWriteError(ReporterError):
    """Raise if points could not be delivered to the time-series store."""


class DuplicateMetricError(ReporterError):
    """Raise if a metric name is already registered."""
