"""Tests for asyncio utils."""

import asyncio

import pytest

from influxreporter.utils.asyncio import IntervalTicker, create_eager_task


async def test_create_eager_task() -> None:
    """Test create eager task."""
    task = create_eager_task(asyncio.sleep(0.01))
    await task
    assert task.done()
    assert not task.cancelled()
    assert task.result() is None


async def test_interval_ticker() -> None:
    """Test ticks keep a fixed period."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    start = loop.time()
    ticker = IntervalTicker(0.05)

    assert await ticker.wait(stop)
    first = loop.time()
    assert await ticker.wait(stop)
    second = loop.time()

    assert first - start == pytest.approx(0.05, abs=0.025)
    assert second - first == pytest.approx(0.05, abs=0.025)


async def test_interval_ticker_late_consumer() -> None:
    """Test a late consumer gets one tick at once and the phase is kept."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    ticker = IntervalTicker(0.05)
    start = ticker.next_tick - 0.05

    assert await ticker.wait(stop)
    await asyncio.sleep(0.12)

    before = loop.time()
    assert await ticker.wait(stop)
    assert loop.time() - before < 0.02
    assert ticker.next_tick == pytest.approx(start + 0.2)


async def test_interval_ticker_stop() -> None:
    """Test setting the stop event ends the wait."""
    stop = asyncio.Event()
    ticker = IntervalTicker(10)

    asyncio.get_running_loop().call_later(0.01, stop.set)
    assert not await ticker.wait(stop)
    assert not await ticker.wait(stop)


async def test_interval_ticker_invalid() -> None:
    """Test the interval must be positive."""
    with pytest.raises(ValueError):
        IntervalTicker(0)
