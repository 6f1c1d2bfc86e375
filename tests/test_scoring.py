# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


import pytest

from insight_core.synthesis.scoring import score_sentence


def test_score_is_deterministic() -> None:
    sentence = "A major study found a 40 percent increase in recent years"
    assert score_sentence(sentence) == score_sentence(sentence)


def test_score_without_terms() -> None:
    # short and no weighted terms
    assert score_sentence("Cats sleep a lot") == 0.0
    # length bonus alone
    assert score_sentence("x" * 100) == pytest.approx(0.2)


def test_length_bonus_bounds() -> None:
    assert score_sentence("x" * 50) == 0.0
    assert score_sentence("x" * 51) == pytest.approx(0.2)
    assert score_sentence("x" * 199) == pytest.approx(0.2)
    assert score_sentence("x" * 200) == 0.0


def test_weighted_terms() -> None:
    assert score_sentence("important") == pytest.approx(0.3)
    assert score_sentence("billion") == pytest.approx(0.2)
    assert score_sentence("latest") == pytest.approx(0.1)
    # each term counts once however often it appears
    assert score_sentence("important important") == pytest.approx(0.3)


def test_score_is_capped() -> None:
    sentence = "The key, major, primary, main, crucial and essential research shows a billion percent increase"
    assert score_sentence(sentence) == 1.0
