"""Prompt strength scorer — heuristic 0-100 score with improvement tips.

Each signal is checked independently and in a fixed order; the order is
also the order tips are reported in. Only the first three tips are kept.
"""

from __future__ import annotations

import re

from promptforge.core.prompt.classifier import has_task_keyword
from promptforge.core.prompt.models import ScoreResult

MAX_SCORE = 100
MAX_TIPS = 3

# (minimum length, points); tiers are additive.
LENGTH_TIERS: tuple[tuple[int, int], ...] = ((20, 15), (50, 15), (100, 10))

TASK_POINTS = 20
AUDIENCE_POINTS = 15
CONTEXT_POINTS = 10
DIGIT_POINTS = 5
PLACEHOLDER_POINTS = 5
TONE_POINTS = 10

TIP_ACTION = "Add a clear action verb (write, analyze, create)"
TIP_AUDIENCE = "Specify your target audience"
TIP_CONTEXT = "Add context about the topic"
TIP_TONE = "Consider specifying the desired tone"

_AUDIENCE = re.compile(r"for\s+(beginners?|experts?|developers?|managers?|students?)", re.IGNORECASE)
_CONTEXT = re.compile(r"about|regarding|on|for", re.IGNORECASE)
_DIGIT = re.compile(r"\d")
_PLACEHOLDER = re.compile(r"\[.+\]")
_TONE = re.compile(r"professional|casual|friendly|formal|persuasive", re.IGNORECASE)


def score_prompt(user_input: str) -> ScoreResult:
    """Score how well-specified a raw request is."""
    score = 0
    tips: list[str] = []

    for min_length, points in LENGTH_TIERS:
        if len(user_input) >= min_length:
            score += points

    if has_task_keyword(user_input):
        score += TASK_POINTS
    else:
        tips.append(TIP_ACTION)

    if _AUDIENCE.search(user_input):
        score += AUDIENCE_POINTS
    else:
        tips.append(TIP_AUDIENCE)

    if _CONTEXT.search(user_input):
        score += CONTEXT_POINTS
    else:
        tips.append(TIP_CONTEXT)

    if _DIGIT.search(user_input):
        score += DIGIT_POINTS

    if _PLACEHOLDER.search(user_input):
        score += PLACEHOLDER_POINTS

    if _TONE.search(user_input):
        score += TONE_POINTS
    else:
        tips.append(TIP_TONE)

    return ScoreResult(score=min(score, MAX_SCORE), tips=tuple(tips[:MAX_TIPS]))
