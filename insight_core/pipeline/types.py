# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from insight_core.search.types import Source
from insight_core.synthesis.types import MAX_CONFIDENCE, MAX_FOLLOW_UP_QUESTIONS

MAX_RESULT_SOURCES = 6


def _new_id() -> str:
    return uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    query: str
    answer: str
    sources: list[Source] = Field(max_length=MAX_RESULT_SOURCES)
    follow_up_questions: list[str] = Field(max_length=MAX_FOLLOW_UP_QUESTIONS)
    timestamp: datetime = Field(default_factory=_now)
    search_time: int = Field(ge=0, description="Elapsed wall-clock time in milliseconds")
    confidence: float = Field(ge=0.0, le=MAX_CONFIDENCE)


class SearchHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    query: str
    timestamp: datetime = Field(default_factory=_now)
    result_id: str | None = None
