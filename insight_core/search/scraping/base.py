# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from abc import ABC, abstractmethod

from httpx import AsyncClient, Response

from insight_core.errors import ProviderError
from insight_core.search.scraping.types import ScrapedContent
from insight_core.search.scraping.utils import clean_soup, get_text_from_soup, parse_html

HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class AsyncScraper(ABC):
    """
    One tier of the content fetch chain.

    `ascrape` raises ProviderError when the tier cannot produce content. A page without readable text
    is a success with empty content.
    """

    # Upper bound on returned content, in characters
    max_content_length: int
    # CSS selector for the preferred content region
    content_selector: str

    @abstractmethod
    async def ascrape(self, link: str, client: AsyncClient) -> ScrapedContent:
        """Do scrape"""
        pass

    def _content_from_response(self, link: str, response: Response) -> ScrapedContent:
        if not response.is_success:
            raise ProviderError(
                self.__class__.__name__, f"unexpected response status {response.status_code}", response.status_code
            )

        soup = clean_soup(parse_html(response.content, response.encoding))
        content = get_text_from_soup(soup, self.content_selector)

        return ScrapedContent(url=link, content=content[: self.max_content_length])
