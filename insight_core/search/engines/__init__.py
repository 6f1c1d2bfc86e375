# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.search.engines.duckduckgo import DuckDuckGoSearch
from insight_core.search.engines.engine import SearchEngine
from insight_core.search.engines.offline import OfflineSearch
from insight_core.search.engines.serpapi import SerpApiSearch

__all__ = ["DuckDuckGoSearch", "OfflineSearch", "SearchEngine", "SerpApiSearch"]
