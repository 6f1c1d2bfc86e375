# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import re
from collections.abc import Callable, Sequence

from insight_core.synthesis.types import FactFragment, QueryCategory

AnswerTemplate = Callable[[str, Sequence[FactFragment]], str]


def _texts(facts: Sequence[FactFragment], start: int, stop: int) -> list[str]:
    return [f.text for f in facts[start:stop]]


def _sentences(facts: Sequence[FactFragment], start: int, stop: int) -> str:
    return " ".join(_texts(facts, start, stop))


def _bullets(facts: Sequence[FactFragment], start: int, stop: int) -> str:
    return "\n".join(f"• {text}" for text in _texts(facts, start, stop))


def definition_answer(query: str, facts: Sequence[FactFragment]) -> str:
    subject = re.sub(r"^(what is|define)\s*", "", query, flags=re.IGNORECASE).strip()

    return (
        f"{subject} refers to {_sentences(facts, 0, 3)}\n\n"
        f"Key characteristics include:\n{_bullets(facts, 3, 6)}\n\n"
        f"This concept is significant because {_sentences(facts, 6, 8)}"
    )


def how_to_answer(query: str, facts: Sequence[FactFragment]) -> str:
    task = re.sub(r"^how to\s*", "", query, flags=re.IGNORECASE)
    steps = "\n\n".join(f"{n}. {text}" for n, text in enumerate(_texts(facts, 0, 5), start=1))

    return (
        f"To {task}, follow these key approaches:\n\n{steps}\n\n"
        f"Additional considerations:\n{_bullets(facts, 5, 8)}"
    )


def comparison_answer(query: str, facts: Sequence[FactFragment]) -> str:
    return (
        f"Regarding {query}, here's a comprehensive comparison:\n\n"
        f"Key differences:\n{_bullets(facts, 0, 4)}\n\n"
        f"Similarities:\n{_bullets(facts, 4, 6)}\n\n"
        f"Practical implications:\n{_sentences(facts, 6, 8)}"
    )


def current_events_answer(query: str, facts: Sequence[FactFragment]) -> str:
    return (
        f"Latest developments regarding {query}:\n\n"
        f"Recent updates:\n{_bullets(facts, 0, 3)}\n\n"
        f"Current status:\n{_sentences(facts, 3, 5)}\n\n"
        f"Future outlook:\n{_sentences(facts, 5, 7)}"
    )


def general_answer(query: str, facts: Sequence[FactFragment]) -> str:
    return (
        f"Based on current information about {query}:\n\n"
        f"{_sentences(facts, 0, 2)}\n\n"
        f"Key aspects include:\n{_bullets(facts, 2, 6)}\n\n"
        f"This is significant because {_sentences(facts, 6, 8)}"
    )


TEMPLATES: dict[QueryCategory, AnswerTemplate] = {
    "definition": definition_answer,
    "how-to": how_to_answer,
    "comparison": comparison_answer,
    "current-events": current_events_answer,
    "general": general_answer,
}


def render_answer(category: QueryCategory, query: str, facts: Sequence[FactFragment]) -> str:
    return TEMPLATES[category](query, facts)
