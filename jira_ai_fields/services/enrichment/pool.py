"""
Bounded-concurrency worker pool.

A fixed number of worker tasks drain a shared queue of (position, item)
pairs and write each result into a pre-sized slot list at the item's
original position. Results therefore come back in submission order no
matter which item finishes first.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_bounded(
    items: Sequence[T],
    handler: Callable[[T], Awaitable[R]],
    concurrency: int,
) -> list[R]:
    """
    Run ``handler`` over every item with at most ``concurrency`` in flight.

    The handler is expected to turn its own failures into a result value.
    If it raises anyway, the worker moves on to the next item; once every
    item has been handled, the exception of the earliest failing item is
    re-raised. Sibling work is never cancelled.

    Args:
        items: Work items, in the order results should be returned
        handler: Async callable producing one result per item
        concurrency: Worker count, raised to 1 if lower

    Returns:
        One result per item, in input order

    Raises:
        Exception: The first handler exception by item position, if any
    """
    if not items:
        return []

    queue: asyncio.Queue[tuple[int, T]] = asyncio.Queue()
    for position, item in enumerate(items):
        queue.put_nowait((position, item))

    slots: list[R | None] = [None] * len(items)
    errors: dict[int, Exception] = {}

    async def worker() -> None:
        while True:
            try:
                position, item = queue.get_nowait()
            except asyncio.QueueEmpty:
                return
            try:
                slots[position] = await handler(item)
            except Exception as e:
                logger.error(f"Unhandled error for item {position}: {e}")
                errors[position] = e

    worker_count = min(max(1, concurrency), len(items))
    logger.debug(f"Running {len(items)} items on {worker_count} workers")

    # Barrier: every worker has drained the queue before results are read
    await asyncio.gather(*(worker() for _ in range(worker_count)))

    if errors:
        raise errors[min(errors)]

    return slots  # type: ignore[return-value]
