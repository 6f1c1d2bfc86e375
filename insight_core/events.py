# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from typing import Literal

from insight_core.emitter import Event

PipelineState = Literal["idle", "retrieving", "fetching", "synthesizing", "done", "failed"]


class PipelineStateEvent(Event):
    state: PipelineState
    query: str


class TrajectoryEvent(Event):
    title: str
    content: str | None = None
