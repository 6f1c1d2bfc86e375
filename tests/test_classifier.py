# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import pytest

from insight_core.synthesis.classifier import classify_query


@pytest.mark.parametrize(
    "query, category",
    [
        ("What is photosynthesis?", "definition"),
        ("define entropy", "definition"),
        ("How to bake bread", "how-to"),
        ("So how do magnets work", "how-to"),
        ("React vs Vue", "comparison"),
        ("Compare Python and Go", "comparison"),
        ("difference between RAM and ROM", "comparison"),
        ("Latest AI news", "current-events"),
        ("recent earthquakes", "current-events"),
        ("Tell me about oceans", "general"),
    ],
)
def test_classify_query(query: str, category: str) -> None:
    assert classify_query(query) == category


def test_first_matching_rule_wins() -> None:
    # definition prefix beats the comparison keyword
    assert classify_query("What is the difference between TCP and UDP") == "definition"
    # how-to beats current-events
    assert classify_query("how do I read the latest news") == "how-to"
    # substring match: "vs" inside a word still counts
    assert classify_query("canvses of the world") == "comparison"
