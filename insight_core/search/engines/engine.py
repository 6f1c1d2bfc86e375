# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import Any

from httpx import AsyncClient, Response

from insight_core.errors import ProviderError
from insight_core.search.types import Source
from insight_core.work import task_pool


class SearchEngine(ABC):
    @abstractmethod
    async def search(self, query: str, max_results: int = 10) -> list[Source]:
        """Do search, raising ProviderError when the provider cannot answer"""
        pass


class HttpSearchEngine(SearchEngine):
    """Search engine backed by a JSON HTTP API."""

    def __init__(self, client: AsyncClient | None = None, timeout: float = 10) -> None:
        self.client = client
        self.timeout = timeout

    def _client(self) -> AbstractAsyncContextManager[AsyncClient]:
        return nullcontext(self.client) if self.client is not None else AsyncClient()

    async def _get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        name = self.__class__.__name__
        try:
            async with self._client() as client, task_pool.throttle():
                response = await client.get(
                    url, params=params, headers={"Accept": "application/json"}, timeout=self.timeout
                )
        except Exception as e:
            raise ProviderError(name, f"request failed: {e!r}") from e

        return self._parse(name, response)

    @staticmethod
    def _parse(name: str, response: Response) -> dict[str, Any]:
        if not response.is_success:
            raise ProviderError(name, f"unexpected response status {response.status_code}", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(name, "response body is not JSON", response.status_code) from e

        if not isinstance(data, dict):
            raise ProviderError(name, "response body is not a JSON object", response.status_code)

        return data
