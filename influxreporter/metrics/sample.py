"""Reservoir samples backing histograms and timers."""

from __future__ import annotations

from abc import ABC, abstractmethod
import random
from threading import Lock

from ..const import DEFAULT_SAMPLE_SIZE
from .snapshot import SampleStats


class Sample(ABC):
    """Abstract base class for a sample of int values."""

    @abstractmethod
    def update(self, value: int) -> None:
        """Add a value to the sample."""

    @abstractmethod
    def clear(self) -> None:
        """Drop all sampled values."""

    @abstractmethod
    def snapshot(self) -> SampleStats:
        """Return statistics over the sampled values."""


class UniformSample(Sample):
    """Uniform sample using reservoir sampling.

    Keeps at most reservoir_size values, every value ever
    offered has the same probability of being retained.
    """

    def __init__(
        self,
        reservoir_size: int = DEFAULT_SAMPLE_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize UniformSample."""
        if reservoir_size <= 0:
            raise ValueError("Reservoir size must be positive")
        self._reservoir_size = reservoir_size
        self._rng = rng or random.Random()
        self._values: list[int] = []
        self._seen = 0
        self._lock = Lock()

    @property
    def size(self) -> int:
        """Return number of retained values."""
        return len(self._values)

    def update(self, value: int) -> None:
        """Offer a value to the reservoir."""
        with self._lock:
            self._seen += 1
            if len(self._values) < self._reservoir_size:
                self._values.append(value)
                return
            index = self._rng.randrange(self._seen)
            if index < self._reservoir_size:
                self._values[index] = value

    def clear(self) -> None:
        """Drop all sampled values."""
        with self._lock:
            self._values.clear()
            self._seen = 0

    def snapshot(self) -> SampleStats:
        """Return statistics over the retained values."""
        with self._lock:
            return SampleStats.from_values(self._values)
