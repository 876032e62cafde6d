"""Prompt engine — ties analysis, assembly, starters and history together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from promptforge.core.prompt.assembler import assemble
from promptforge.core.prompt.classifier import classify
from promptforge.core.prompt.models import (
    GeneratedPrompt,
    GenerationOptions,
    InputAnalysis,
    StarterSelection,
)
from promptforge.core.prompt.roles import resolve_role
from promptforge.core.prompt.scorer import score_prompt
from promptforge.core.prompt.variables import extract_variables

if TYPE_CHECKING:
    from promptforge.core.starter.registry import StarterRegistry
    from promptforge.core.storage.models import HistoryEntry
    from promptforge.core.storage.repository import HistoryRepository

logger = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when asked to generate a prompt from blank input."""


class StarterNotFoundError(Exception):
    """Raised when a starter template id is not registered."""


class PromptEngine:
    """Application-level entry point for the prompt engine.

    The assembly functions themselves are pure; the engine adds the
    surrounding behavior: rejecting blank requests, recording history, and
    turning starter templates into a request plus empty variable slots.
    """

    def __init__(
        self,
        starters: StarterRegistry | None = None,
        history: HistoryRepository | None = None,
    ) -> None:
        self.starters = starters
        self.history = history

    def analyze(self, user_input: str) -> InputAnalysis:
        """Score, tips, detected variables, task type and word count for a draft request."""
        scored = score_prompt(user_input)
        classification = classify(user_input)
        return InputAnalysis(
            score=scored.score,
            tips=scored.tips,
            variables=tuple(extract_variables(user_input)),
            task_type=classification.task_type,
            subtype=classification.subtype,
            word_count=len(user_input.split()),
        )

    def generate(self, user_input: str, options: GenerationOptions | None = None) -> GeneratedPrompt:
        """Assemble a prompt and record it in history.

        Raises EmptyInputError for blank input.
        """
        if not user_input.strip():
            raise EmptyInputError("Cannot generate a prompt from empty input")

        opts = options or GenerationOptions()
        text = assemble(user_input, opts)
        classification = classify(user_input)

        history_id: int | None = None
        if self.history is not None:
            entry = self.history.add_entry(user_input, text, opts.framework, opts.tone)
            history_id = entry.id if entry else None

        logger.info(
            "Generated prompt: framework=%s, tone=%s, task=%s/%s, chars=%d",
            opts.framework,
            opts.tone,
            classification.task_type,
            classification.subtype,
            len(text),
        )
        return GeneratedPrompt(
            text=text,
            task_type=classification.task_type,
            subtype=classification.subtype,
            role=resolve_role(classification.task_type, classification.subtype),
            options=opts,
            history_id=history_id,
        )

    def starter(self, starter_id: str) -> StarterSelection:
        """Return a starter's request with every declared variable blanked out."""
        starter = self.starters.get(starter_id) if self.starters is not None else None
        if starter is None:
            raise StarterNotFoundError(f"No starter template with id {starter_id!r}")
        return StarterSelection(
            starter_id=starter.id,
            input=starter.input,
            custom_vars={name: "" for name in starter.variables},
        )

    def restore(self, entry_id: int) -> HistoryEntry | None:
        """Fetch a history entry so a client can reload its input, output and options."""
        if self.history is None:
            return None
        return self.history.get_entry(entry_id)
