"""This file contains the constants used by the reporter."""

# Measurement name used when none is configured
DEFAULT_MEASUREMENT = "reporter"

# Tag key identifying the statistic a multi-field point represents
BUCKET_TAG = "bucket"

# Quantiles requested from histogram and timer snapshots. The field
# deriver labels the returned values positionally with PERCENTILE_LABELS.
PERCENTILES = (0.5, 0.75, 0.95, 0.99)
PERCENTILE_LABELS = ("p50", "p75", "p95", "p99")

# Reservoir size of the default histogram sample
DEFAULT_SAMPLE_SIZE = 1028

# Meters tick their moving averages every 5 seconds
METER_TICK_INTERVAL = 5.0

# Same defaults as the official InfluxDB client write options
DEFAULT_WRITE_TIMEOUT = 10.0
DEFAULT_BATCH_SIZE = 5000
