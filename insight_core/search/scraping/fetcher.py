# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import asyncio
from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import Any

from colorama import Fore, Style
from httpx import AsyncClient

from insight_core.config import Settings, settings
from insight_core.emitter import EventEmitter
from insight_core.errors import FallbackExhaustedError
from insight_core.events import TrajectoryEvent
from insight_core.logging import get_logger
from insight_core.search.fallback import OrderedFallback
from insight_core.search.scraping.base import AsyncScraper
from insight_core.search.scraping.beautiful_soup import BeautifulSoupScraper
from insight_core.search.scraping.scraper_api import ScraperApiScraper
from insight_core.search.scraping.types import ScrapedContent
from insight_core.utils import get_secret_value

logger = get_logger(__name__)


class ContentFetcher(EventEmitter):
    """
    Fetches the readable text of a page through an ordered chain of scrapers.

    Never raises: when every tier fails the page content is the empty string.
    """

    def __init__(
        self,
        scrapers: Sequence[AsyncScraper] | None = None,
        client: AsyncClient | None = None,
        timeout: float | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.scrapers = list(scrapers) if scrapers is not None else self.default_scrapers()
        self.client = client
        self.timeout = timeout or settings.SCRAPER_TIMEOUT
        self._chain: OrderedFallback[AsyncScraper, ScrapedContent] = OrderedFallback("scrape", self.scrapers)

    @staticmethod
    def default_scrapers(config: Settings | None = None) -> list[AsyncScraper]:
        config = config or settings
        scrapers: list[AsyncScraper] = []
        # an empty key counts as unset
        if get_secret_value(config.SCRAPER_API_KEY):
            scrapers.append(
                ScraperApiScraper(api_key=config.SCRAPER_API_KEY, base_url=str(config.SCRAPER_API_BASE_URL))
            )
        scrapers.append(BeautifulSoupScraper())
        return scrapers

    def _client(self) -> AbstractAsyncContextManager[AsyncClient]:
        return nullcontext(self.client) if self.client is not None else AsyncClient()

    async def fetch(self, url: str) -> str:
        try:
            async with self._client() as client:
                scraped = await self._chain.run(
                    lambda scraper: asyncio.wait_for(scraper.ascrape(link=url, client=client), timeout=self.timeout)
                )
        except FallbackExhaustedError as e:
            logger.error(f"{Fore.RED}Could not fetch {url}: {e}{Style.RESET_ALL}")
            return ""
        except Exception:
            logger.exception(f"{Fore.RED}Unexpected error fetching {url}{Style.RESET_ALL}")
            return ""

        logger.info(f"Fetched {len(scraped.content)} characters from {url}")
        if scraped.content:
            await self._emit(TrajectoryEvent(title="Added source", content=url))

        return scraped.content
