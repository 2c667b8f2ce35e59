"""Bounded fan-out over a list of items."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


async def run_with_concurrency(
    items: Sequence[T],
    limit: int,
    worker: Callable[[T], Awaitable[None]],
) -> None:
    """Run ``worker`` over ``items`` with at most ``limit`` calls in flight.

    ``min(limit, len(items))`` tasks share one cursor and each pulls the next
    unclaimed item until none remain. Completion order is not preserved.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    cursor = iter(items)

    async def _drain() -> None:
        for item in cursor:
            await worker(item)

    await asyncio.gather(*(_drain() for _ in range(min(limit, len(items)))))
