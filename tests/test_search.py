# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from collections.abc import Callable

import httpx
import pytest
from pydantic import SecretStr, ValidationError

from insight_core.config import Settings
from insight_core.errors import ProviderError
from insight_core.search.engines import DuckDuckGoSearch, OfflineSearch, SerpApiSearch
from insight_core.search.engines.factory import SearchEngineFactory
from insight_core.search.engines.offline import related_topics, wikipedia_url
from insight_core.search.types import Source


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_source_domain_is_derived_from_url() -> None:
    source = Source(id="x-0", title="t", url="https://News.Example.org/a?b=c", snippet="s")

    assert source.domain == "news.example.org"
    assert source.model_dump()["domain"] == "news.example.org"


@pytest.mark.parametrize("url", ["http://[broken/path", "not a url", "mailto:someone@example.com"])
def test_source_rejects_url_without_host(url: str) -> None:
    with pytest.raises(ValidationError):
        Source(id="x-0", title="t", url=url, snippet="s")


@pytest.mark.asyncio
async def test_serpapi_search() -> None:
    """SerpAPI organic results are normalized to sources"""
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(
            200,
            json={
                "organic_results": [
                    {"title": "IBM", "link": "https://www.ibm.com/about", "snippet": "About IBM", "date": "2024-01-01"},
                    {"title": "No link", "snippet": "skipped"},
                    {"title": "Wiki", "link": "https://en.wikipedia.org/wiki/IBM", "snippet": "IBM article"},
                ],
                "search_metadata": {"total_time_taken": 0.4},
            },
        )

    engine = SerpApiSearch(
        api_key=SecretStr("secret"), base_url="https://serp.test/search.json", client=mock_client(handler)
    )
    results = await engine.search("IBM", max_results=8)

    assert seen == {"engine": "google", "q": "IBM", "api_key": "secret", "num": "8"}
    assert [r.id for r in results] == ["serp-0", "serp-2"]
    assert results[0].domain == "www.ibm.com"
    assert results[0].published_date == "2024-01-01"
    assert [r.relevance_score for r in results] == [1.0, 0.8]


@pytest.mark.asyncio
async def test_serpapi_search_error_status() -> None:
    engine = SerpApiSearch(
        api_key=SecretStr("bad"),
        base_url="https://serp.test/search.json",
        client=mock_client(lambda request: httpx.Response(401, json={"error": "Invalid API key"})),
    )

    with pytest.raises(ProviderError) as excinfo:
        await engine.search("IBM")

    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_serpapi_search_without_results() -> None:
    engine = SerpApiSearch(
        api_key=SecretStr("k"),
        base_url="https://serp.test/search.json",
        client=mock_client(lambda request: httpx.Response(200, json={"search_metadata": {}})),
    )

    assert await engine.search("nothing") == []


@pytest.mark.asyncio
async def test_duckduckgo_search() -> None:
    """DuckDuckGo related topics are normalized to sources"""
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(
            200,
            json={
                "RelatedTopics": [
                    {"FirstURL": "https://duckduckgo.com/Python", "Text": "Python - A programming language"},
                    {"Text": "No url here"},
                    {"FirstURL": "https://duckduckgo.com/Monty", "Text": "Monty Python comedy group"},
                    {"FirstURL": "https://duckduckgo.com/Extra", "Text": "Beyond the requested count"},
                ]
            },
        )

    engine = DuckDuckGoSearch(base_url="https://ddg.test/", client=mock_client(handler))
    results = await engine.search("python", max_results=3)

    assert seen == {"q": "python", "format": "json", "no_html": "1", "skip_disambig": "1"}
    assert [r.id for r in results] == ["ddg-0", "ddg-2"]
    assert results[0].title == "Python"
    assert results[0].snippet == "Python - A programming language"
    assert results[1].title == "Monty Python comedy group"
    assert results[1].domain == "duckduckgo.com"
    assert results[1].relevance_score == 0.8


def test_duckduckgo_title_from_text() -> None:
    assert DuckDuckGoSearch.title_from_text("Title - rest") == "Title"
    assert DuckDuckGoSearch.title_from_text(" - rest of a long line") == " - rest of a long line"[:60]


@pytest.mark.asyncio
async def test_duckduckgo_empty_response() -> None:
    engine = DuckDuckGoSearch(
        base_url="https://ddg.test/", client=mock_client(lambda request: httpx.Response(200, json={}))
    )

    assert await engine.search("zzzz") == []


@pytest.mark.asyncio
async def test_duckduckgo_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    engine = DuckDuckGoSearch(base_url="https://ddg.test/", client=mock_client(handler))

    with pytest.raises(ProviderError):
        await engine.search("python")


@pytest.mark.asyncio
async def test_duckduckgo_invalid_json() -> None:
    engine = DuckDuckGoSearch(
        base_url="https://ddg.test/", client=mock_client(lambda request: httpx.Response(200, text="<html>"))
    )

    with pytest.raises(ProviderError):
        await engine.search("python")


@pytest.mark.parametrize(
    "query, first_title",
    [
        ("machine learning basics", "Artificial Intelligence Overview"),
        ("What is quantum computing?", "Quantum Computing Advances"),
        ("medical imaging", "Modern Healthcare Innovations"),
        ("software testing", "Software Development Trends"),
        ("stock market", "Global Economic Trends"),
        ("oceans", "Understanding oceans"),
    ],
)
def test_related_topics_bundles(query: str, first_title: str) -> None:
    topics = related_topics(query)

    assert len(topics) == 6
    assert topics[0][0] == first_title


def test_wikipedia_url() -> None:
    assert wikipedia_url("Internet of Things (IoT)") == "https://en.wikipedia.org/wiki/Internet_of_Things_(IoT)"
    assert wikipedia_url("Understanding C++") == "https://en.wikipedia.org/wiki/Understanding_C%2B%2B"


@pytest.mark.asyncio
async def test_offline_search() -> None:
    results = await OfflineSearch().search("What is quantum computing?", max_results=3)

    assert len(results) == 6
    assert [r.id for r in results] == [f"fallback-{i}" for i in range(6)]
    assert all(r.domain == "en.wikipedia.org" for r in results)
    scores = [r.relevance_score for r in results]
    assert scores == [1.0, 0.85, 0.7, 0.55, 0.4, 0.25]


def test_engine_factory_chain() -> None:
    engines = SearchEngineFactory.create_chain(Settings(_env_file=None))  # type: ignore[call-arg]
    assert [type(e) for e in engines] == [DuckDuckGoSearch]

    engines = SearchEngineFactory.create_chain(Settings(SERPAPI_API_KEY=SecretStr("k")))  # type: ignore[call-arg]
    assert [type(e) for e in engines] == [SerpApiSearch, DuckDuckGoSearch]

    engines = SearchEngineFactory.create_chain(Settings(SERPAPI_API_KEY=SecretStr("")))  # type: ignore[call-arg]
    assert [type(e) for e in engines] == [DuckDuckGoSearch]


@pytest.mark.asyncio
async def test_serpapi_skips_malformed_link() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "organic_results": [
                    {"title": "A", "link": "https://a.example.com/", "snippet": "first"},
                    {"title": "Broken", "link": "http://[broken/path", "snippet": "bad host"},
                    {"title": "C", "link": "https://c.example.com/", "snippet": "third"},
                ]
            },
        )

    engine = SerpApiSearch(
        api_key=SecretStr("k"), base_url="https://serp.test/search.json", client=mock_client(handler)
    )
    results = await engine.search("anything")

    assert [r.id for r in results] == ["serp-0", "serp-2"]
    assert [r.domain for r in results] == ["a.example.com", "c.example.com"]


@pytest.mark.asyncio
async def test_duckduckgo_skips_malformed_url() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "RelatedTopics": [
                    {"FirstURL": "http://[broken/path", "Text": "Broken - bad host"},
                    {"FirstURL": "https://duckduckgo.com/Tides", "Text": "Tides - ocean movement"},
                ]
            },
        )

    results = await DuckDuckGoSearch(base_url="https://ddg.test/", client=mock_client(handler)).search("tides")

    assert [r.id for r in results] == ["ddg-1"]
    assert results[0].domain == "duckduckgo.com"
    assert results[0].relevance_score == 0.9
