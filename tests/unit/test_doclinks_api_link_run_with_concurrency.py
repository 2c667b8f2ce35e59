"""Unit tests for the bounded worker pool."""

import asyncio

import pytest

from doclinks.api.link.run_with_concurrency import run_with_concurrency


def test_every_item_processed_once_within_limit():
    processed = []
    in_flight = 0
    peak = 0

    async def worker(item):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.001 * (item % 3))
        processed.append(item)
        in_flight -= 1

    asyncio.run(run_with_concurrency(list(range(40)), 5, worker))

    assert sorted(processed) == list(range(40))
    assert peak == 5


def test_fewer_items_than_limit():
    processed = []

    async def worker(item):
        await asyncio.sleep(0)
        processed.append(item)

    asyncio.run(run_with_concurrency(["a", "b"], 15, worker))
    assert sorted(processed) == ["a", "b"]


def test_empty_items():
    async def worker(item):
        raise AssertionError("worker must not run")

    asyncio.run(run_with_concurrency([], 15, worker))


def test_invalid_limit():
    async def worker(item):
        pass

    with pytest.raises(ValueError, match="limit must be at least 1"):
        asyncio.run(run_with_concurrency([1], 0, worker))
