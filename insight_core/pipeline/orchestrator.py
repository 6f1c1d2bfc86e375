# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import asyncio
import logging
import time
from typing import Any
from uuid import uuid4

from insight_core.config import settings
from insight_core.emitter import EventEmitter
from insight_core.errors import PipelineError
from insight_core.events import PipelineState, PipelineStateEvent, TrajectoryEvent
from insight_core.logging import SearchLogAdapter, get_logger, get_search_logger
from insight_core.pipeline.history import SearchHistory
from insight_core.pipeline.types import MAX_RESULT_SOURCES, SearchHistoryEntry, SearchResult
from insight_core.search.retriever import SourceRetriever
from insight_core.search.scraping.fetcher import ContentFetcher
from insight_core.search.types import Source
from insight_core.synthesis.synthesizer import AnswerSynthesizer
from insight_core.utils import log_settings

logger = get_logger(__name__)

ACTIVE_STATES: frozenset[PipelineState] = frozenset({"retrieving", "fetching", "synthesizing"})


class SearchPipeline(EventEmitter):
    """
    Answers a query: retrieve sources, fetch the leading pages, synthesize an answer.

    Builds its own collaborators from settings unless they are passed in. Overlapping calls to
    `perform_search` run independently; the shared history is not guarded against concurrent writers.
    """

    def __init__(
        self,
        retriever: SourceRetriever | None = None,
        fetcher: ContentFetcher | None = None,
        synthesizer: AnswerSynthesizer | None = None,
        history: SearchHistory | None = None,
        max_sources: int | None = None,
        max_scraped_sources: int | None = None,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.retriever = retriever or SourceRetriever()
        self.fetcher = fetcher or ContentFetcher()
        self.synthesizer = synthesizer or AnswerSynthesizer()
        self.history = history if history is not None else SearchHistory()
        self.max_sources = max_sources or settings.SEARCH_MAX_SOURCES
        self.max_scraped_sources = (
            settings.SEARCH_MAX_SCRAPED_SOURCES if max_scraped_sources is None else max_scraped_sources
        )

        self.state: PipelineState = "idle"
        self.current_result: SearchResult | None = None
        self.error: str | None = None

        self.forward_events_from(self.fetcher)

        if logger.isEnabledFor(logging.DEBUG):
            log_settings(settings, name="Insight")

    @property
    def is_searching(self) -> bool:
        return self.state in ACTIVE_STATES

    async def perform_search(self, query: str) -> SearchResult | None:
        """
        Run the pipeline for `query`.

        Returns None for a blank query (nothing else happens) or when the search failed, in which case
        `error` holds a message for the user.
        """
        if not query.strip():
            return None

        self.error = None
        try:
            result = await self.run(query)
        except PipelineError as e:
            self.error = str(e)
            await self._set_state("failed", query)
            self.state = "idle"
            return None

        self.current_result = result
        await self._set_state("done", query)
        return result

    async def run(self, query: str) -> SearchResult:
        """Run the pipeline, raising PipelineError on any unexpected failure"""
        search_id = uuid4().hex
        log = get_search_logger(__name__, search_id)
        start_time = time.perf_counter()

        try:
            await self._set_state("retrieving", query)
            await self._emit(TrajectoryEvent(title="Searching the web", content=query))
            sources = await self.retriever.retrieve(query, self.max_sources)
            if not sources:
                log.info("No sources found, continuing with synthesis")

            await self._set_state("fetching", query)
            await self._emit(TrajectoryEvent(title="Fetching content"))
            scraped_texts = await self._fetch_contents(sources[: self.max_scraped_sources], log)

            await self._set_state("synthesizing", query)
            await self._emit(TrajectoryEvent(title="Generating answer"))
            answer = await self.synthesizer.synthesize(query, sources, scraped_texts)

            result = SearchResult(
                query=query,
                answer=answer.answer,
                sources=sources[:MAX_RESULT_SOURCES],
                follow_up_questions=answer.follow_up_questions,
                search_time=int((time.perf_counter() - start_time) * 1000),
                confidence=answer.confidence,
            )
        except Exception as e:
            log.exception(f"Search failed for '{query}'")
            raise PipelineError(str(e) or "Search failed") from e

        self.history.add(SearchHistoryEntry(id=search_id, query=query, result_id=result.id))
        log.info(f"Search complete in {result.search_time}ms, confidence {result.confidence:.2f}")
        return result

    def clear_history(self) -> None:
        self.history.clear()

    def clear_current_result(self) -> None:
        self.current_result = None
        self.error = None

    async def _fetch_contents(self, sources: list[Source], log: SearchLogAdapter) -> list[str]:
        async def fetch_one(source: Source) -> str:
            try:
                return await self.fetcher.fetch(source.url)
            except Exception as e:
                log.for_component("fetch").warning(f"Failed to fetch {source.url}: {e!r}")
                return ""

        return list(await asyncio.gather(*(fetch_one(s) for s in sources)))

    async def _set_state(self, state: PipelineState, query: str) -> None:
        self.state = state
        await self._emit(PipelineStateEvent(state=state, query=query))
