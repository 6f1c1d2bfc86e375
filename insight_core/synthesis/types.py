# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

QueryCategory = Literal["definition", "how-to", "comparison", "current-events", "general"]

MAX_CONFIDENCE = 0.95
MAX_FOLLOW_UP_QUESTIONS = 3


class FactFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    score: float = Field(ge=0.0, le=1.0)


class Answer(BaseModel):
    answer: str
    follow_up_questions: list[str] = Field(default_factory=list, max_length=MAX_FOLLOW_UP_QUESTIONS)
    confidence: float = Field(ge=0.0, le=MAX_CONFIDENCE)
