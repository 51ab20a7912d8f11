from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


async def run_bounded(
    items: Sequence[T], handler: Callable[[T], Awaitable[R]], concurrency: int
) -> list[R]:
    """Run ``handler`` once per item with at most ``concurrency`` calls in flight.

    Workers share a claim cursor and write results by index, so the returned
    list follows the order of ``items`` whatever order the calls finish in.
    Exceptions from ``handler`` are not caught here.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be at least 1")

    results: list[R | None] = [None] * len(items)
    cursor = 0

    async def worker() -> None:
        nonlocal cursor
        while cursor < len(items):
            # Claim and increment happen with no await in between.
            index = cursor
            cursor += 1
            results[index] = await handler(items[index])

    workers = [worker() for _ in range(min(concurrency, len(items)))]
    if workers:
        await asyncio.gather(*workers)
    return results  # type: ignore[return-value]
