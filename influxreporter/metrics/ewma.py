"""Exponentially weighted moving averages for meters."""

from __future__ import annotations

import math

from ..const import METER_TICK_INTERVAL


def _alpha(minutes: int) -> float:
    return 1 - math.exp(-METER_TICK_INTERVAL / 60 / minutes)


class EWMA:
    """Moving average of a rate, ticked every METER_TICK_INTERVAL seconds.

    Not thread safe, the owning meter serializes access.
    """

    __slots__ = ("_alpha", "_initialized", "_rate", "_uncounted")

    def __init__(self, alpha: float) -> None:
        """Initialize EWMA."""
        self._alpha = alpha
        self._rate = 0.0
        self._uncounted = 0
        self._initialized = False

    @classmethod
    def one_minute(cls) -> EWMA:
        return cls(_alpha(1))

    @classmethod
    def five_minutes(cls) -> EWMA:
        return cls(_alpha(5))

    @classmethod
    def fifteen_minutes(cls) -> EWMA:
        return cls(_alpha(15))

    @property
    def rate(self) -> float:
        """Return the moving average in events per second."""
        return self._rate

    def update(self, count: int) -> None:
        """Add events that will be accounted on the next tick."""
        self._uncounted += count

    def tick(self) -> None:
        """Fold the uncounted events into the moving average."""
        instant_rate = self._uncounted / METER_TICK_INTERVAL
        self._uncounted = 0
        if self._initialized:
            self._rate += self._alpha * (instant_rate - self._rate)
        else:
            self._rate = instant_rate
            self._initialized = True
