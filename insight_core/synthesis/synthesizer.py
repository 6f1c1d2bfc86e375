# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import asyncio
from collections.abc import Sequence
from functools import reduce

from insight_core.logging import get_logger
from insight_core.search.types import Source
from insight_core.synthesis.confidence import estimate_confidence
from insight_core.synthesis.strategies import DEFAULT_STRATEGIES, Strategy
from insight_core.synthesis.types import MAX_FOLLOW_UP_QUESTIONS, Answer

logger = get_logger(__name__)

SCRAPED_EXCERPT_LENGTH = 1000
FALLBACK_CONFIDENCE = 0.3

FOLLOW_UP_TEMPLATES = [
    "What are the latest developments in {topic}?",
    "How does {topic} impact different industries?",
    "What are the challenges and limitations of {topic}?",
    "What does the future hold for {topic}?",
    "How can someone get started with {topic}?",
]


def build_context(query: str, sources: Sequence[Source], scraped_texts: Sequence[str]) -> str:
    context = f"Query: {query}\n\nAvailable Sources:\n"

    for n, source in enumerate(sources, start=1):
        context += f"{n}. {source.title}\n"
        context += f"   URL: {source.url}\n"
        context += f"   Summary: {source.snippet}\n"
        context += f"   Domain: {source.domain}\n\n"

    if scraped_texts:
        context += "Detailed Content:\n"
        for n, text in enumerate(scraped_texts, start=1):
            if text.strip():
                context += f"Source {n} Content:\n{text[:SCRAPED_EXCERPT_LENGTH]}...\n\n"

    return context


def select_best_answer(answers: Sequence[str], query: str) -> str:
    """
    Keep the running best, replacing it only with a strictly longer candidate that mentions the first
    query token. The first answer wins when no later one qualifies.
    """
    tokens = query.split()
    anchor = tokens[0] if tokens else ""
    return reduce(lambda best, current: current if len(current) > len(best) and anchor in current else best, answers)


def follow_up_questions(query: str) -> list[str]:
    words = query.lower().split()
    topic = next((w for w in words if len(w) > 4), words[0] if words else query)
    return [t.format(topic=topic) for t in FOLLOW_UP_TEMPLATES][:MAX_FOLLOW_UP_QUESTIONS]


def fallback_answer(query: str) -> Answer:
    return Answer(
        answer=(
            f"I understand you're asking about {query}. While I'm currently processing this information, I can "
            "provide some general insights. This topic involves multiple aspects that are worth exploring further. "
            "Current research and developments in this area show promising trends and applications across various "
            "fields."
        ),
        follow_up_questions=[
            f"What are the key principles of {query}?",
            f"How is {query} being applied today?",
            f"What are the future prospects for {query}?",
        ],
        confidence=FALLBACK_CONFIDENCE,
    )


class AnswerSynthesizer:
    """
    Synthesizes an answer from retrieved sources and fetched page content.

    Every strategy runs concurrently against the same context and all of them finish before one answer is
    selected. Any failure yields the fixed fallback answer instead of an exception.
    """

    def __init__(self, strategies: Sequence[Strategy] | None = None) -> None:
        self.strategies = list(strategies) if strategies is not None else list(DEFAULT_STRATEGIES)

    async def synthesize(self, query: str, sources: Sequence[Source], scraped_texts: Sequence[str]) -> Answer:
        try:
            context = build_context(query, sources, scraped_texts)

            answers = await asyncio.gather(*(strategy(query, context) for strategy in self.strategies))
            answer = select_best_answer(answers, query)

            return Answer(
                answer=answer,
                follow_up_questions=follow_up_questions(query),
                confidence=estimate_confidence(sources, scraped_texts, answer),
            )
        except Exception:
            logger.exception(f"Answer synthesis failed for '{query}', using fallback answer")
            return fallback_answer(query)
