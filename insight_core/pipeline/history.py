# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections import deque
from collections.abc import Iterator

from insight_core.pipeline.types import SearchHistoryEntry

MAX_HISTORY_ENTRIES = 10


class SearchHistory:
    """
    Most recent searches first, bounded to the last ten.

    Single writer only: concurrent pipelines sharing one history are not coordinated.
    """

    def __init__(self, max_entries: int = MAX_HISTORY_ENTRIES) -> None:
        self._entries: deque[SearchHistoryEntry] = deque(maxlen=max_entries)

    def add(self, entry: SearchHistoryEntry) -> None:
        # the oldest entry falls off the right end
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> list[SearchHistoryEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SearchHistoryEntry]:
        return iter(list(self._entries))
