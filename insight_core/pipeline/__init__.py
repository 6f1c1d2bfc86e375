# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.pipeline.history import SearchHistory
from insight_core.pipeline.orchestrator import SearchPipeline
from insight_core.pipeline.types import SearchHistoryEntry, SearchResult

__all__ = ["SearchHistory", "SearchHistoryEntry", "SearchPipeline", "SearchResult"]
