# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.search.scraping.beautiful_soup import BeautifulSoupScraper
from insight_core.search.scraping.fetcher import ContentFetcher
from insight_core.search.scraping.scraper_api import ScraperApiScraper

__all__ = ["BeautifulSoupScraper", "ContentFetcher", "ScraperApiScraper"]
