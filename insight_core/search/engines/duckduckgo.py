# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from httpx import AsyncClient
from pydantic import ValidationError

from insight_core.config import settings
from insight_core.logging import get_logger
from insight_core.search.engines.engine import HttpSearchEngine
from insight_core.search.types import Source, rank_score

logger = get_logger(__name__)


class DuckDuckGoSearch(HttpSearchEngine):
    """
    DuckDuckGo Instant Answer engine, keyless
    """

    score_step = 0.1

    def __init__(
        self, base_url: str | None = None, client: AsyncClient | None = None, timeout: float | None = None
    ) -> None:
        super().__init__(client=client, timeout=timeout or settings.SEARCH_TIMEOUT)
        self.base_url = str(base_url or settings.DDG_API_BASE_URL)

    async def search(self, query: str, max_results: int = 10) -> list[Source]:
        data = await self._get_json(
            self.base_url,
            params={"q": query, "format": "json", "no_html": 1, "skip_disambig": 1},
        )

        sources = []

        # skipped topics keep their slot in the id and score
        for index, topic in enumerate((data.get("RelatedTopics") or [])[:max_results]):
            if not isinstance(topic, dict):
                continue
            url = topic.get("FirstURL")
            text = topic.get("Text")
            if not url or not text:
                continue

            try:
                source = Source(
                    id=f"ddg-{index}",
                    title=self.title_from_text(text),
                    url=url,
                    snippet=text,
                    relevance_score=rank_score(index, self.score_step),
                )
            except ValidationError:
                logger.debug(f"Skipping malformed DuckDuckGo topic {index}")
                continue
            sources.append(source)

        return sources

    @staticmethod
    def title_from_text(text: str) -> str:
        return text.split(" - ")[0] or text[:60]
