# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.config import Settings, settings
from insight_core.search.engines.duckduckgo import DuckDuckGoSearch
from insight_core.search.engines.engine import SearchEngine
from insight_core.search.engines.serpapi import SerpApiSearch
from insight_core.utils import get_secret_value


class SearchEngineFactory:
    """Factory for the ordered network search engines."""

    @staticmethod
    def create_chain(config: Settings | None = None) -> list[SearchEngine]:
        config = config or settings
        engines: list[SearchEngine] = []

        # The primary tier only exists when it has a non-empty key
        if get_secret_value(config.SERPAPI_API_KEY):
            engines.append(
                SerpApiSearch(
                    api_key=config.SERPAPI_API_KEY,
                    base_url=str(config.SERPAPI_BASE_URL),
                    engine=config.SERPAPI_ENGINE,
                    timeout=config.SEARCH_TIMEOUT,
                )
            )

        engines.append(DuckDuckGoSearch(base_url=str(config.DDG_API_BASE_URL), timeout=config.SEARCH_TIMEOUT))
        return engines
