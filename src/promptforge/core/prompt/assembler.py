"""Prompt assembler — renders a request into one of the fixed framework layouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from promptforge.core.prompt.classifier import classify
from promptforge.core.prompt.models import GenerationOptions
from promptforge.core.prompt.roles import resolve_role
from promptforge.core.prompt.taxonomy import (
    DEFAULT_LANGUAGE,
    DEFAULT_TONE,
    LANGUAGE_QUALITY_NOTES,
    LANGUAGES,
    TONE_DESCRIPTIONS,
)
from promptforge.core.prompt.variables import substitute_variables

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptParts:
    """Everything a framework renderer interpolates."""

    role: str
    task: str
    tone: str
    length: str
    language_note: str


# ---------------------------------------------------------------------------
# Option descriptions
# ---------------------------------------------------------------------------

def describe_tone(tone: str) -> str:
    """Descriptive phrase for a tone key; unknown keys read as professional."""
    return TONE_DESCRIPTIONS.get(tone, TONE_DESCRIPTIONS[DEFAULT_TONE])


def describe_length(length: int) -> str:
    """Map the 0-100 length slider to a word-count band."""
    if length <= 25:
        return "concise (under 150 words)"
    if length <= 50:
        return "moderate (150-300 words)"
    if length <= 75:
        return "detailed (300-500 words)"
    return "comprehensive (500+ words)"


def build_language_lines(language: str) -> list[str]:
    """Instruction lines for a non-English response.

    English and unknown codes produce no lines. A quality line is added only
    for codes present in LANGUAGE_QUALITY_NOTES.
    """
    if language == DEFAULT_LANGUAGE:
        return []
    name = LANGUAGES.get(language)
    if name is None:
        logger.debug("Unknown language code %r; responding in English", language)
        return []

    lines = [f"**Language:** Respond in {name}."]
    quality = LANGUAGE_QUALITY_NOTES.get(language)
    if quality:
        lines.append(quality)
    return lines


# ---------------------------------------------------------------------------
# Framework renderers
# ---------------------------------------------------------------------------

def render_rtf(p: PromptParts) -> str:
    return (
        f"## Role\nAct as {p.role}.\n{p.language_note}\n\n"
        f"## Task\n{p.task}\n\n"
        f"### Requirements\n- **Tone:** {p.tone}\n- **Length:** {p.length}\n\n"
        "### Guidelines\n"
        "1. Start with the most important information\n"
        "2. Use clear structure\n"
        "3. Include specific examples\n"
        "4. End with actionable takeaways"
    )


def render_care(p: PromptParts) -> str:
    return (
        f"## Context\nYou are {p.role}. The user needs assistance with the following.\n"
        f"{p.language_note}\n\n"
        f"## Action\n{p.task}\n\n"
        f"## Requirements\n- **Tone:** {p.tone}\n- **Length:** {p.length}\n\n"
        "## Result Expected\n"
        "Provide a complete, polished response that fully addresses the request."
    )


def render_risen(p: PromptParts) -> str:
    return (
        f"## Role\nAct as {p.role}.\n\n"
        f"## Instructions\n{p.task}\n\n"
        f"**Tone:** {p.tone}\n**Length:** {p.length}\n{p.language_note}\n\n"
        "## Steps\n"
        "1. Understand the core objective\n"
        "2. Structure response logically  \n"
        "3. Include relevant examples\n"
        "4. Review for clarity\n\n"
        "## End Goal\n"
        "Deliver high-quality response that provides genuine value."
    )


def render_cot(p: PromptParts) -> str:
    return (
        f"Act as {p.role}.\n{p.language_note}\n\n"
        f"## Task\n{p.task}\n\n"
        "Think step-by-step:\n"
        "1. What exactly is being asked?\n"
        "2. What key points to cover?\n"
        "3. What structure makes sense?\n\n"
        f"**Tone:** {p.tone}\n**Length:** {p.length}\n\n"
        "Provide your response:"
    )


def render_fewshot(p: PromptParts) -> str:
    return (
        f"Act as {p.role}.\n{p.language_note}\n\n"
        f"## Task\n{p.task}\n\n"
        f"**Tone:** {p.tone}\n**Length:** {p.length}\n\n"
        "Good response example:\n"
        "✅ Clear and structured\n"
        "✅ Addresses the request\n"
        "✅ Actionable details\n\n"
        "Provide your response:"
    )


Renderer = Callable[[PromptParts], str]

FRAMEWORK_RENDERERS: Mapping[str, Renderer] = MappingProxyType({
    "rtf": render_rtf,
    "care": render_care,
    "risen": render_risen,
    "cot": render_cot,
    "fewshot": render_fewshot,
})

# Role / Task / Requirements / Guidelines, same layout as RTF.
DEFAULT_RENDERER: Renderer = render_rtf


def select_renderer(framework: str) -> Renderer:
    renderer = FRAMEWORK_RENDERERS.get(framework)
    if renderer is None:
        logger.debug("Unknown framework %r; using default layout", framework)
        return DEFAULT_RENDERER
    return renderer


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def assemble(user_input: str, options: GenerationOptions | None = None) -> str:
    """Build the final prompt text for a request.

    Never fails: empty input, unknown framework/tone/language keys and
    unfilled placeholders all produce a prompt.
    """
    opts = options or GenerationOptions()

    classification = classify(user_input)
    role = resolve_role(classification.task_type, classification.subtype)

    language_note = "".join(f"\n\n{line}" for line in build_language_lines(opts.language))
    parts = PromptParts(
        role=role,
        task=substitute_variables(user_input, opts.custom_vars),
        tone=describe_tone(opts.tone),
        length=describe_length(opts.length),
        language_note=language_note,
    )
    return select_renderer(opts.framework)(parts)
