# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import logging
from typing import Any

from insight_core.config import settings

SEARCH_ID_PREFIX_LENGTH = 8


def get_logger(logger_name: str) -> logging.Logger:
    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.log_level)
    return logger


def get_search_logger(logger_name: str, search_id: str, component: str = "pipeline") -> "SearchLogAdapter":
    """Logger whose messages are tagged with the component and a short form of the search id"""
    return SearchLogAdapter(
        get_logger(logger_name), {"component": component, "search_id": search_id[:SEARCH_ID_PREFIX_LENGTH]}
    )


class SearchLogAdapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: Any) -> tuple[str, Any]:
        return (f"[{self.extra['component']}:{self.extra['search_id']}] {msg}", kwargs)  # type: ignore

    def for_component(self, component: str) -> "SearchLogAdapter":
        return SearchLogAdapter(self.logger, {**self.extra, "component": component})  # type: ignore
