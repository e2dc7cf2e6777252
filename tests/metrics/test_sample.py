"""Test reservoir samples."""

import random

import pytest

from influxreporter.metrics import SampleStats, UniformSample


def test_uniform_sample_keeps_all_below_reservoir_size() -> None:
    """Test the reservoir holds every value until it is full."""
    sample = UniformSample(100)
    for value in range(50):
        sample.update(value)

    assert sample.size == 50
    assert sample.snapshot().values == tuple(range(50))


def test_uniform_sample_is_bounded() -> None:
    """Test the reservoir never grows past its size."""
    sample = UniformSample(100, rng=random.Random(4242))
    for value in range(10000):
        sample.update(value)

    snapshot = sample.snapshot()
    assert sample.size == 100
    assert len(snapshot.values) == 100
    assert list(snapshot.values) == sorted(snapshot.values)
    assert all(0 <= value < 10000 for value in snapshot.values)


def test_uniform_sample_clear() -> None:
    """Test clearing the sample."""
    sample = UniformSample(10)
    sample.update(1)
    sample.clear()

    assert sample.snapshot() == SampleStats()


def test_uniform_sample_invalid_size() -> None:
    """Test a reservoir needs room for at least one value."""
    with pytest.raises(ValueError):
        UniformSample(0)


def test_sample_stats_single_value() -> None:
    """Test statistics of a single value."""
    stats = SampleStats.from_values([7])

    assert stats.min == 7
    assert stats.max == 7
    assert stats.variance == 0.0
    assert stats.percentiles([0.5, 0.99]) == [7.0, 7.0]
