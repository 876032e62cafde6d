"""Tests for the heuristic prompt strength scorer."""

from __future__ import annotations

import pytest

from promptforge.core.prompt.scorer import (
    TIP_ACTION,
    TIP_AUDIENCE,
    TIP_CONTEXT,
    TIP_TONE,
    score_prompt,
)


class TestExamples:
    def test_well_specified_request(self):
        result = score_prompt("Write a blog post about AI for beginners, professional tone")
        assert result.score >= 70
        assert len(result.tips) <= 1

    def test_bare_greeting(self):
        result = score_prompt("hi")
        assert result.score <= 20
        assert result.tips == (TIP_ACTION, TIP_AUDIENCE, TIP_CONTEXT)


class TestLengthTiers:
    def _score_of_filler(self, n: int) -> int:
        # "x" matches no other signal.
        return score_prompt("x" * n).score

    def test_tiers_are_additive(self):
        assert self._score_of_filler(19) == 0
        assert self._score_of_filler(20) == 15
        assert self._score_of_filler(50) == 30
        assert self._score_of_filler(100) == 40
        assert self._score_of_filler(120) == 40


class TestSignals:
    def test_digit_and_placeholder_points(self):
        assert score_prompt("x1").score == 5
        assert score_prompt("[x]").score == 5

    def test_tone_tip_is_fourth_and_dropped(self):
        # Four tips are generated; only the first three survive.
        assert TIP_TONE not in score_prompt("zzz").tips

    def test_tone_tip_reported_when_others_pass(self):
        result = score_prompt("Write a guide on rust for developers")
        assert result.tips == (TIP_TONE,)

    def test_context_matches_anywhere(self):
        # "on" inside "python" counts as context.
        assert TIP_CONTEXT not in score_prompt("python").tips

    def test_capped_at_100(self):
        text = (
            "Write a professional blog post about [topic] for beginners with 5 examples, "
            "covering history, current practice, and future outlook in depth."
        )
        assert score_prompt(text).score == 100


@pytest.mark.parametrize(
    "text",
    ["", "a", "Write", "x" * 500, "for students about [x] 42 casual create", "🙂" * 30],
)
def test_score_bounds_and_tip_count(text):
    result = score_prompt(text)
    assert 0 <= result.score <= 100
    assert len(result.tips) <= 3
