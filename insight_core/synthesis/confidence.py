# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Sequence

from insight_core.search.types import Source
from insight_core.synthesis.types import MAX_CONFIDENCE

QUALITY_DOMAIN_MARKERS = ("edu", "gov", "org")

BASE_CONFIDENCE = 0.5
SOURCE_QUALITY_WEIGHT = 0.2
CONTENT_DEPTH_STEPS = (1000, 3000)
ANSWER_LENGTH_STEPS = (500, 1000)
STEP_BONUS = 0.1


def is_quality_source(source: Source) -> bool:
    # substring match, "organic.com" counts
    return any(marker in source.domain for marker in QUALITY_DOMAIN_MARKERS)


def estimate_confidence(sources: Sequence[Source], scraped_texts: Sequence[str], answer: str) -> float:
    """
    Heuristic reliability of an answer, never above 0.95.

    Starts from 0.5 and adds up to 0.2 for the share of quality domains among the sources, 0.1 for
    each scraped-content length step passed and 0.1 for each answer length step passed.
    """
    confidence = BASE_CONFIDENCE

    if sources:
        quality = sum(1 for s in sources if is_quality_source(s))
        confidence += (quality / len(sources)) * SOURCE_QUALITY_WEIGHT

    content_length = sum(len(text) for text in scraped_texts)
    confidence += STEP_BONUS * sum(1 for step in CONTENT_DEPTH_STEPS if content_length > step)
    confidence += STEP_BONUS * sum(1 for step in ANSWER_LENGTH_STEPS if len(answer) > step)

    return max(0.0, min(confidence, MAX_CONFIDENCE))
