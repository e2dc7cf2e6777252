"""Utils for asyncio."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

import async_timeout

_T = TypeVar("_T")


class IntervalTicker:
    """Interval Ticker.

    IntervalTicker fires at a fixed period measured from
    its creation, using the event loop clock.

    A consumer that is late gets the pending tick immediately.
    Ticks missed entirely while the consumer was busy are
    dropped, so ticks never pile up and the period keeps
    its original phase.
    """

    __slots__ = ("_interval", "_loop", "_next_tick")

    def __init__(self, interval: float) -> None:
        """Initialize IntervalTicker."""
        if interval <= 0:
            raise ValueError("Interval must be positive")
        self._interval = interval
        self._loop = asyncio.get_running_loop()
        self._next_tick = self._loop.time() + interval

    @property
    def next_tick(self) -> float:
        """Return loop time of the next tick."""
        return self._next_tick

    async def wait(self, stop_event: asyncio.Event) -> bool:
        """Wait for the next tick.

        Return False if stop_event was set before the tick.
        """
        if stop_event.is_set():
            return False

        delay = max(self._next_tick - self._loop.time(), 0)
        try:
            async with async_timeout.timeout(delay):
                await stop_event.wait()
        except TimeoutError:
            self._advance()
            return True
        return False

    def _advance(self) -> None:
        now = self._loop.time()
        self._next_tick += self._interval
        if self._next_tick <= now:
            missed = (now - self._next_tick) // self._interval + 1
            self._next_tick += missed * self._interval


def create_eager_task(
    coro: Awaitable[_T],
    *,
    name: str | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Task[_T]:
    """Create a task from a coroutine and schedule it to run immediately."""
    return asyncio.Task(
        coro,
        loop=loop or asyncio.get_running_loop(),
        name=name,
        eager_start=True,  # type: ignore[call-arg]
    )
