# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


IMPORTANCE_TERMS = ("important", "significant", "key", "major", "primary", "main", "crucial", "essential")
STATISTIC_TERMS = ("percent", "%", "million", "billion", "increase", "decrease", "study", "research")
RECENCY_TERMS = ("recent", "latest", "new", "current", "2024", "2023")

WEIGHTED_TERMS: list[tuple[tuple[str, ...], float]] = [
    (IMPORTANCE_TERMS, 0.3),
    (STATISTIC_TERMS, 0.2),
    (RECENCY_TERMS, 0.1),
]

LENGTH_BONUS = 0.2


def score_sentence(sentence: str) -> float:
    """
    Heuristic importance of a sentence in [0, 1].

    Each listed term found anywhere in the lower-cased sentence adds its weight once, substantial
    sentences (strictly between 50 and 200 characters) get a bonus, and the total is capped at 1.0.
    """
    sentence_lower = sentence.lower()
    score = 0.0

    for terms, weight in WEIGHTED_TERMS:
        for term in terms:
            if term in sentence_lower:
                score += weight

    if 50 < len(sentence) < 200:
        score += LENGTH_BONUS

    return min(score, 1.0)
