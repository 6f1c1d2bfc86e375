# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.search.retriever import SourceRetriever
from insight_core.search.scraping import ContentFetcher
from insight_core.search.types import Source

__all__ = ["ContentFetcher", "Source", "SourceRetriever"]
