"""Thread-safe in-memory metrics registry."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging
from threading import Lock
from typing import TypeVar

from ..exceptions import DuplicateMetricError
from .base import Metric, MetricsRegistry
from .kinds import Counter, Gauge, GaugeFloat64, Histogram, Meter, Timer

_LOGGER = logging.getLogger(__name__)

_MetricT = TypeVar("_MetricT", bound=Metric)


class Registry(MetricsRegistry):
    """Keep named metrics shared between producers and the reporter."""

    def __init__(self) -> None:
        """Initialize Registry."""
        self._metrics: dict[str, Metric] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        """Return number of registered metrics."""
        return len(self._metrics)

    def __contains__(self, name: object) -> bool:
        return name in self._metrics

    def __iter__(self) -> Iterator[tuple[str, Metric]]:
        """Iterate over a copy of the registered metrics."""
        with self._lock:
            items = list(self._metrics.items())
        return iter(items)

    def get(self, name: str) -> Metric | None:
        """Return metric by name."""
        return self._metrics.get(name)

    def register(self, name: str, metric: Metric) -> None:
        """Register a metric under a unique name."""
        with self._lock:
            if name in self._metrics:
                raise DuplicateMetricError(f"Metric {name} already registered")
            self._metrics[name] = metric
        _LOGGER.debug("Registered metric %s", name)

    def get_or_register(self, name: str, factory: Callable[[], _MetricT]) -> _MetricT:
        """Return the metric registered as name or create and register it."""
        with self._lock:
            if (metric := self._metrics.get(name)) is None:
                metric = self._metrics[name] = factory()
                _LOGGER.debug("Registered metric %s", name)
        return metric  # type: ignore[return-value]

    def unregister(self, name: str) -> None:
        """Remove a metric, unknown names are ignored."""
        with self._lock:
            self._metrics.pop(name, None)

    def clear(self) -> None:
        """Remove all metrics."""
        with self._lock:
            self._metrics.clear()

    def counter(self, name: str) -> Counter:
        """Get or create a counter."""
        return self._typed(name, Counter)

    def gauge(self, name: str) -> Gauge:
        """Get or create an int gauge."""
        return self._typed(name, Gauge)

    def gauge_float64(self, name: str) -> GaugeFloat64:
        """Get or create a float gauge."""
        return self._typed(name, GaugeFloat64)

    def histogram(self, name: str) -> Histogram:
        """Get or create a histogram with a uniform sample."""
        return self._typed(name, Histogram)

    def meter(self, name: str) -> Meter:
        """Get or create a meter."""
        return self._typed(name, Meter)

    def timer(self, name: str) -> Timer:
        """Get or create a timer."""
        return self._typed(name, Timer)

    def _typed(self, name: str, kind: type[_MetricT]) -> _MetricT:
        metric = self.get_or_register(name, kind)
        if not isinstance(metric, kind):
            raise DuplicateMetricError(
                f"Metric {name} already registered as {type(metric).__name__}",
            )
        return metric
