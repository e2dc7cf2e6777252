"""Base write sink interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..reporter.point import Point


class WriteSink(ABC):
    """Abstract base class for a time-series write sink."""

    @abstractmethod
    def enqueue(self, point: Point) -> None:
        """
        Queue a point for the next flush.

        Must not block.

        Args:
            point: Point to deliver
        """

    @abstractmethod
    async def flush(self) -> None:
        """
        Deliver all queued points.

        Queued points are dropped whether or not the delivery
        succeeds.

        Raises:
            ReporterWriteError: The store could not be reached or
                rejected the points
        """

    @abstractmethod
    async def close(self) -> None:
        """
        Release underlying connections.

        Calling close more than once is allowed.
        """
