# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import re

from insight_core.synthesis.scoring import score_sentence
from insight_core.synthesis.types import FactFragment

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")

MIN_FRAGMENT_LENGTH = 20
SCORE_THRESHOLD = 0.6
MAX_FACTS = 10


def split_sentences(text: str) -> list[str]:
    return [s for s in SENTENCE_BOUNDARY.split(text) if len(s.strip()) > MIN_FRAGMENT_LENGTH]


def extract_facts(context: str) -> list[FactFragment]:
    """
    Candidate facts from free text, in the order they appear.

    Only fragments scoring above the threshold are kept and at most ten are returned.
    """
    facts = []
    for sentence in split_sentences(context):
        score = score_sentence(sentence)
        if score > SCORE_THRESHOLD:
            facts.append(FactFragment(text=sentence.strip(), score=score))

    return facts[:MAX_FACTS]
