# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


# Portions of this file are derived from the Apache 2.0 licensed project "gpt-researcher"
# Original source: https://github.com/assafelovic/gpt-researcher
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Changes made:
# - Configure semaphore via max_concurrent_tasks
# - Rate limiter
# - Network-only pool, no thread executor

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from aiolimiter import AsyncLimiter

from insight_core.config import settings
from insight_core.logging import get_logger

logger = get_logger(__name__)


class WorkerPool:
    """Bounds concurrency and request rate of outbound provider calls."""

    def __init__(
        self,
        name: str,
        max_concurrent_tasks: int = 8,
        rate_limit: int = 8,
        rate_period: float = 2,
    ) -> None:
        self.name = name
        self.semaphore = asyncio.Semaphore(max_concurrent_tasks)
        self.rate_limiter = AsyncLimiter(rate_limit, rate_period)
        self._active = 0

    @asynccontextmanager
    async def throttle(self) -> AsyncIterator[None]:
        async with self.semaphore:
            async with self.rate_limiter:
                self._active += 1
                logger.debug(f"[{self.name}] acquired, active={self._active}")
                try:
                    yield
                finally:
                    self._active -= 1
                    logger.debug(f"[{self.name}] released, active={self._active}")


# Shared by every search and scraping provider
task_pool = WorkerPool(
    name="network",
    max_concurrent_tasks=settings.MAX_CONCURRENT_TASKS,
    rate_limit=settings.RATE_LIMIT_TASKS,
    rate_period=settings.RATE_PERIOD_TASKS,
)
