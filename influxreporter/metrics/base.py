"""Base metric and registry interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any


class Metric(ABC):
    """Abstract base class for a metric kept in a registry."""

    @abstractmethod
    def snapshot(self) -> Any:
        """
        Return an immutable point-in-time view of the metric.

        The snapshot must be safe to take while producers keep
        updating the live metric.
        """


class MetricsRegistry(ABC):
    """Abstract base class for an enumerable metrics registry."""

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[str, Metric]]:
        """
        Iterate over all registered metrics.

        Every metric registered at call time is yielded exactly once,
        in no particular order.
        """

    def each(self, visit: Callable[[str, Metric], None]) -> None:
        """
        Visit every registered metric.

        Args:
            visit: Callback receiving the metric name and the metric
        """
        for name, metric in self:
            visit(name, metric)
