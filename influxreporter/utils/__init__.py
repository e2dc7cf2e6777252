"""Utils for InfluxReporter."""
