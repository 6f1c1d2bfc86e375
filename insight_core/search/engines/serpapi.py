# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from httpx import AsyncClient
from pydantic import SecretStr, ValidationError

from insight_core.config import settings
from insight_core.logging import get_logger
from insight_core.search.engines.engine import HttpSearchEngine
from insight_core.search.types import Source, rank_score
from insight_core.utils import get_secret_value

logger = get_logger(__name__)


class SerpApiSearch(HttpSearchEngine):
    """
    SerpAPI Retriever, the key-authenticated primary provider
    """

    score_step = 0.1

    def __init__(
        self,
        api_key: SecretStr | None = None,
        base_url: str | None = None,
        engine: str | None = None,
        client: AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(client=client, timeout=timeout or settings.SEARCH_TIMEOUT)
        self.api_key = api_key or settings.SERPAPI_API_KEY
        self.base_url = str(base_url or settings.SERPAPI_BASE_URL)
        self.engine = engine or settings.SERPAPI_ENGINE

    async def search(self, query: str, max_results: int = 10) -> list[Source]:
        """
        Searches the query using SerpAPI
        Returns:
            list: Sources in provider rank order, empty when there are no organic results
        """
        data = await self._get_json(
            self.base_url,
            params={
                "engine": self.engine,
                "q": query,
                "api_key": get_secret_value(self.api_key) or "",
                "num": max_results,
            },
        )

        sources = []

        # Normalizing results to the common Source shape
        for index, result in enumerate(data.get("organic_results") or []):
            link = result.get("link")
            if not link:
                continue
            try:
                source = Source(
                    id=f"serp-{index}",
                    title=result.get("title", ""),
                    url=link,
                    snippet=result.get("snippet", ""),
                    published_date=result.get("date"),
                    relevance_score=rank_score(index, self.score_step),
                )
            except ValidationError:
                logger.debug(f"Skipping malformed SerpAPI result {index}")
                continue
            sources.append(source)

        return sources[:max_results]
