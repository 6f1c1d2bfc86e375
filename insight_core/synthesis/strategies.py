# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Awaitable, Callable

from insight_core.synthesis.classifier import classify_query
from insight_core.synthesis.facts import extract_facts
from insight_core.synthesis.templates import render_answer

Strategy = Callable[[str, str], Awaitable[str]]


async def factual_answer(query: str, context: str) -> str:
    """Structured answer assembled from the facts found in the context"""
    return render_answer(classify_query(query), query, extract_facts(context))


async def analytical_answer(query: str, context: str) -> str:
    insights = (
        "Based on the available information, several key insights emerge that provide deeper understanding "
        "of this topic."
    )
    trends = "Current trends indicate evolving patterns and developments that are shaping the landscape of this field."
    implications = (
        "The implications of these findings suggest important considerations for future developments and "
        "applications."
    )
    return f"{insights}\n\n{trends}\n\n{implications}"


async def contextual_answer(query: str, context: str) -> str:
    background = (
        "Understanding the background context is essential for grasping the full scope and significance of "
        "this topic."
    )
    current_state = "The current state reflects ongoing developments and established practices in this area."
    outlook = (
        "Looking ahead, emerging trends and technological advances suggest continued evolution and new "
        "opportunities."
    )
    return f"{background}\n\n{current_state}\n\n{outlook}"


# Order matters: the first strategy is the default pick
DEFAULT_STRATEGIES: list[Strategy] = [factual_answer, analytical_answer, contextual_answer]
