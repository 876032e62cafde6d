"""Task classifier — maps a free-text request to a task type and subtype."""

from __future__ import annotations

import logging

from promptforge.core.prompt.models import TaskClassification
from promptforge.core.prompt.taxonomy import (
    DEFAULT_SUBTYPE,
    DEFAULT_TASK_TYPE,
    TASK_TAXONOMY,
    all_task_keywords,
)

logger = logging.getLogger(__name__)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in text for kw in keywords)


def classify(user_input: str) -> TaskClassification:
    """Classify a request by keyword containment.

    Task types are tried in declaration order and the first one with a
    matching keyword wins; there is no scoring between candidates. Within
    the winning task type the first matching subtype wins, else "default".
    Matching is plain substring containment, so "underwrite" counts as
    "write".
    """
    text = user_input.lower()

    for task_type, pattern in TASK_TAXONOMY.items():
        if not _contains_any(text, pattern.keywords):
            continue
        subtype = DEFAULT_SUBTYPE
        for name, keywords in pattern.subtypes.items():
            if _contains_any(text, keywords):
                subtype = name
                break
        logger.debug("Classified input as %s/%s", task_type, subtype)
        return TaskClassification(task_type=task_type, subtype=subtype)

    return TaskClassification(task_type=DEFAULT_TASK_TYPE, subtype=DEFAULT_SUBTYPE)


def has_task_keyword(user_input: str) -> bool:
    """True if any task-type trigger keyword appears in the input."""
    return _contains_any(user_input.lower(), all_task_keywords())
