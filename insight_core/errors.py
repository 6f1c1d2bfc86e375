# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


class InsightError(Exception):
    """Base class for insight_core errors"""


class ProviderError(InsightError):
    """
    A search or scraping provider could not produce a result.

    Raised on transport failures, timeouts, non-2xx responses and unparseable bodies. Always handled at
    the provider boundary by moving on to the next provider in the chain.
    """

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.status_code = status_code


class FallbackExhaustedError(ProviderError):
    """Every provider in a fallback chain failed."""

    def __init__(self, chain: str, errors: list[Exception]) -> None:
        super().__init__(chain, f"all {len(errors)} providers failed")
        self.errors = errors


class PipelineError(InsightError):
    """Unexpected failure surfaced to the caller as a single message."""
