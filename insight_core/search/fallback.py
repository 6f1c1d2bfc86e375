# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

from insight_core.errors import FallbackExhaustedError
from insight_core.logging import get_logger

logger = get_logger(__name__)

P = TypeVar("P")
T = TypeVar("T")


class OrderedFallback(Generic[P, T]):
    """
    Tries providers in order and returns the first result that did not raise.

    A provider that returns an empty result has succeeded; only an exception moves the chain on.
    """

    def __init__(self, name: str, providers: Sequence[P]) -> None:
        self.name = name
        self.providers = list(providers)

    async def run(self, attempt: Callable[[P], Awaitable[T]]) -> T:
        errors: list[Exception] = []

        for provider in self.providers:
            provider_name = provider.__class__.__name__
            try:
                result = await attempt(provider)
            except Exception as e:
                logger.warning(f"[{self.name}] {provider_name} failed, trying next provider: {e!r}")
                errors.append(e)
                continue

            logger.debug(f"[{self.name}] {provider_name} succeeded")
            return result

        raise FallbackExhaustedError(self.name, errors)
