# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import pytest

from insight_core.search.types import Source
from insight_core.synthesis.confidence import estimate_confidence, is_quality_source


def source(url: str) -> Source:
    return Source(id="s", title="t", url=url, snippet="")


def test_base_confidence() -> None:
    assert estimate_confidence([source("https://example.com")], [], "") == pytest.approx(0.5)


def test_empty_sources_do_not_divide_by_zero() -> None:
    assert estimate_confidence([], [], "") == pytest.approx(0.5)
    assert estimate_confidence([], [], "a" * 2000) == pytest.approx(0.7)


def test_quality_source_ratio() -> None:
    sources = [source("https://mit.edu/a"), source("https://nasa.gov/b"), source("https://example.com/c")]
    assert estimate_confidence(sources[:2], [], "") == pytest.approx(0.7)
    assert estimate_confidence(sources[2:] + sources[:1], [], "") == pytest.approx(0.6)


def test_quality_is_substring_match() -> None:
    assert is_quality_source(source("https://organic.com/food"))
    assert is_quality_source(source("https://en.wikipedia.org/wiki/X"))
    assert not is_quality_source(source("https://example.com"))


def test_content_depth_steps() -> None:
    sources = [source("https://example.com")]
    assert estimate_confidence(sources, ["a" * 1000], "") == pytest.approx(0.5)
    assert estimate_confidence(sources, ["a" * 600, "b" * 600], "") == pytest.approx(0.6)
    assert estimate_confidence(sources, ["a" * 3001], "") == pytest.approx(0.7)


def test_answer_length_steps() -> None:
    sources = [source("https://example.com")]
    assert estimate_confidence(sources, [], "a" * 500) == pytest.approx(0.5)
    assert estimate_confidence(sources, [], "a" * 501) == pytest.approx(0.6)
    assert estimate_confidence(sources, [], "a" * 1001) == pytest.approx(0.7)


def test_confidence_is_capped() -> None:
    sources = [source("https://mit.edu"), source("https://nasa.gov")]
    confidence = estimate_confidence(sources, ["a" * 5000], "a" * 2000)
    assert confidence == 0.95
