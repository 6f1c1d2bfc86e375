# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import asyncio

import pytest

from insight_core.work import WorkerPool


@pytest.mark.asyncio
async def test_throttle_bounds_concurrency() -> None:
    pool = WorkerPool(name="test", max_concurrent_tasks=2, rate_limit=100, rate_period=1)
    running = 0
    peak = 0

    async def task() -> None:
        nonlocal running, peak
        async with pool.throttle():
            running += 1
            peak = max(peak, running)
            await asyncio.sleep(0.01)
            running -= 1

    await asyncio.gather(*(task() for _ in range(6)))

    assert peak == 2


@pytest.mark.asyncio
async def test_throttle_releases_on_error() -> None:
    pool = WorkerPool(name="test", max_concurrent_tasks=1, rate_limit=100, rate_period=1)

    with pytest.raises(RuntimeError):
        async with pool.throttle():
            raise RuntimeError("boom")

    # the single slot is free again
    await asyncio.wait_for(pool.semaphore.acquire(), timeout=1)
    pool.semaphore.release()
