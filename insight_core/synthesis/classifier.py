# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from insight_core.synthesis.types import QueryCategory


def classify_query(query: str) -> QueryCategory:
    """Intent category of a query, the first matching rule wins"""
    query_lower = query.lower()

    if query_lower.startswith(("what is", "define")):
        return "definition"
    if query_lower.startswith("how to") or "how do" in query_lower:
        return "how-to"
    if any(term in query_lower for term in ("vs", "compare", "difference")):
        return "comparison"
    if any(term in query_lower for term in ("latest", "recent", "news")):
        return "current-events"

    return "general"
