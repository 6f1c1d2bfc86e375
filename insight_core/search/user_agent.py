# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0

from functools import cache

from insight_core.config import settings


@cache
def user_agent() -> str:
    """User agent string sent on direct page fetches."""
    if settings.USER_AGENT_CONTACT:
        return f"InsightCore/1.0 ({settings.USER_AGENT_CONTACT})"
    return "InsightCore/1.0"
