# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from insight_core.utils import domain_of


class Source(BaseModel):
    """
    A single retrieved web reference.

    `domain` is derived from `url` and cannot be supplied by a provider. A url without a parseable host is
    rejected when the source is built. `relevance_score` orders sources within one search call only.
    """

    model_config = ConfigDict(frozen=True)  # makes it immutable and hashable

    id: str
    title: str
    url: str
    snippet: str
    published_date: str | None = None
    relevance_score: float | None = Field(default=None, le=1.0)

    @field_validator("url")
    @classmethod
    def check_url_host(cls, url: str) -> str:
        # urlparse raises ValueError on malformed hosts such as unbalanced IPv6 brackets
        if not domain_of(url):
            raise ValueError(f"url has no host: {url!r}")
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def domain(self) -> str:
        return domain_of(self.url)


def rank_score(index: int, step: float) -> float:
    """Relevance of the `index`-th result of a single search call."""
    return round(1 - index * step, 4)
