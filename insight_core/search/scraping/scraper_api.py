# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from httpx import AsyncClient
from pydantic import SecretStr

from insight_core.config import settings
from insight_core.errors import ProviderError
from insight_core.search.scraping.base import HTML_ACCEPT, AsyncScraper
from insight_core.search.scraping.types import ScrapedContent
from insight_core.utils import get_secret_value
from insight_core.work import task_pool


class ScraperApiScraper(AsyncScraper):
    """
    Fetches pages through ScraperAPI, the key-authenticated scraping tier
    """

    max_content_length = 5000
    content_selector = "main, article, .content, #content"

    def __init__(self, api_key: SecretStr | None = None, base_url: str | None = None) -> None:
        self.api_key = api_key or settings.SCRAPER_API_KEY
        self.base_url = str(base_url or settings.SCRAPER_API_BASE_URL)

    async def ascrape(self, link: str, client: AsyncClient) -> ScrapedContent:
        api_key = get_secret_value(self.api_key)
        if not api_key:
            raise ProviderError(self.__class__.__name__, "scraper API key not configured")

        try:
            async with task_pool.throttle():
                response = await client.get(
                    self.base_url,
                    params={"api_key": api_key, "url": link},
                    headers={"Accept": HTML_ACCEPT},
                    timeout=settings.SCRAPER_TIMEOUT,
                )
        except Exception as e:
            raise ProviderError(self.__class__.__name__, f"request failed: {e!r}") from e

        return self._content_from_response(link, response)
