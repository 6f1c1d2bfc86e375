# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Sequence

from colorama import Fore, Style

from insight_core.errors import FallbackExhaustedError
from insight_core.logging import get_logger
from insight_core.search.engines.engine import SearchEngine
from insight_core.search.engines.factory import SearchEngineFactory
from insight_core.search.engines.offline import OfflineSearch
from insight_core.search.fallback import OrderedFallback
from insight_core.search.types import Source

logger = get_logger(__name__)


class SourceRetriever:
    """
    Retrieves sources through an ordered chain of search engines.

    The first engine that answers wins, even with an empty list. Results are never merged across engines.
    When every network engine fails, the deterministic offline bundle for the query is returned.
    """

    def __init__(self, engines: Sequence[SearchEngine] | None = None, offline: OfflineSearch | None = None) -> None:
        self.engines = list(engines) if engines is not None else SearchEngineFactory.create_chain()
        self.offline = offline or OfflineSearch()
        self._chain: OrderedFallback[SearchEngine, list[Source]] = OrderedFallback("search", self.engines)

    async def retrieve(self, query: str, count: int = 8) -> list[Source]:
        try:
            sources = await self._chain.run(lambda engine: engine.search(query, max_results=count))
        except FallbackExhaustedError as e:
            logger.warning(f"{Fore.YELLOW}{e}, using offline sources{Style.RESET_ALL}")
            return await self.offline.search(query, max_results=count)

        logger.info(f"Retrieved {len(sources)} sources for '{query}'")
        return sources[:count]
