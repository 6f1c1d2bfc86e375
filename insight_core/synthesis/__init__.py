# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.synthesis.classifier import classify_query
from insight_core.synthesis.confidence import estimate_confidence
from insight_core.synthesis.facts import extract_facts
from insight_core.synthesis.scoring import score_sentence
from insight_core.synthesis.synthesizer import AnswerSynthesizer
from insight_core.synthesis.types import Answer, FactFragment, QueryCategory

__all__ = [
    "Answer",
    "AnswerSynthesizer",
    "FactFragment",
    "QueryCategory",
    "classify_query",
    "estimate_confidence",
    "extract_facts",
    "score_sentence",
]
