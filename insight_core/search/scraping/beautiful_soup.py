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
# - Non-2xx responses raise instead of returning empty content
# - Content region limited to main/article


from httpx import AsyncClient

from insight_core.config import settings
from insight_core.errors import ProviderError
from insight_core.logging import get_logger
from insight_core.search.scraping.base import HTML_ACCEPT, AsyncScraper
from insight_core.search.scraping.types import ScrapedContent
from insight_core.search.user_agent import user_agent
from insight_core.work import task_pool

logger = get_logger(__name__)


class BeautifulSoupScraper(AsyncScraper):
    """
    Direct fetch of the page itself, the keyless scraping tier
    """

    max_content_length = 3000
    content_selector = "main, article"

    async def ascrape(self, link: str, client: AsyncClient) -> ScrapedContent:
        """
        Makes a GET request for `link`, parses the HTML with BeautifulSoup, removes script and style
        elements and returns the text of the main content region (or the body).

        Raises:
          ProviderError: the request failed or answered with a non-2xx status.
        """
        try:
            async with task_pool.throttle():
                response = await client.get(
                    link,
                    headers={"Accept": HTML_ACCEPT, "User-Agent": user_agent()},
                    timeout=settings.SCRAPER_TIMEOUT,
                    follow_redirects=True,
                )
        except Exception as e:
            raise ProviderError(self.__class__.__name__, f"request failed: {e!r}") from e

        if response.status_code == 403:
            logger.warning(f"Error 403 when scraping link {link}")

        return self._content_from_response(link, response)
