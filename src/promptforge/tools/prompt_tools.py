"""MCP tools for analyzing requests and generating framework prompts."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastmcp import FastMCP

from promptforge.core.prompt.engine import StarterNotFoundError
from promptforge.core.prompt.export import PROMPT_FILENAME, export_text
from promptforge.core.prompt.models import GenerationOptions
from promptforge.core.prompt.taxonomy import (
    FRAMEWORKS,
    LANGUAGE_QUALITY_NOTES,
    LANGUAGES,
    TONE_DESCRIPTIONS,
)

if TYPE_CHECKING:
    from promptforge.core.config.settings import Settings
    from promptforge.core.prompt.engine import PromptEngine

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _choice(value: str | None, known: Any, default: str, label: str) -> str:
    """Default blank choices; pass unknown ones through so assembly can fall back."""
    if value in (None, ""):
        return default
    if value not in known:
        logger.warning("Unknown %s %r; the engine will fall back to its default", label, value)
    return value


def _clamp_length(value: int | None, default: int) -> int:
    if value is None:
        return default
    return max(0, min(100, int(value)))


def _clean_vars(custom_vars: dict[str, Any] | None) -> dict[str, str]:
    if not custom_vars:
        return {}
    return {str(k): "" if v is None else str(v) for k, v in custom_vars.items()}


def register_prompt_tools(mcp: FastMCP, engine: PromptEngine, settings: Settings) -> None:
    """Register prompt analysis, generation, starter and export tools."""

    @mcp.tool
    def analyze_prompt(request: str) -> str:
        """Score a draft request (0-100) and suggest how to make it stronger.

        Also reports the detected task type and any [bracketed] variables.

        Args:
            request: The natural-language request to analyze.
        """
        analysis = engine.analyze(request)
        return json.dumps({
            "score": analysis.score,
            "tips": list(analysis.tips),
            "variables": list(analysis.variables),
            "task_type": analysis.task_type,
            "subtype": analysis.subtype,
            "word_count": analysis.word_count,
        }, indent=2)

    @mcp.tool
    def generate_prompt(
        request: str,
        framework: str | None = None,
        tone: str | None = None,
        length: int | None = None,
        language: str | None = None,
        custom_vars: dict[str, str] | None = None,
    ) -> str:
        """Turn a short request into a structured prompt.

        Args:
            request: What you want the model to do, e.g. "Write a blog post about [topic]".
            framework: rtf | care | risen | cot | fewshot (default from settings).
            tone: professional | casual | persuasive | academic | creative | friendly.
            length: 0-100 slider; higher asks for a longer response.
            language: Response language code (en, es, fr, de, pt, zh, ja, bn).
            custom_vars: Values for [bracketed] variables in the request.
        """
        options = GenerationOptions(
            framework=_choice(framework, FRAMEWORKS, settings.default_framework, "framework"),
            tone=_choice(tone, TONE_DESCRIPTIONS, settings.default_tone, "tone"),
            length=_clamp_length(length, settings.default_length),
            language=_choice(language, LANGUAGES, settings.default_language, "language"),
            custom_vars=_clean_vars(custom_vars),
        )
        result = engine.generate(request, options)
        return json.dumps({
            "prompt": result.text,
            "task_type": result.task_type,
            "subtype": result.subtype,
            "role": result.role,
            "options": result.options.to_dict(),
            "history_id": result.history_id,
        }, indent=2, ensure_ascii=False)

    @mcp.tool
    def list_frameworks() -> str:
        """List the prompt frameworks a request can be rendered into."""
        return json.dumps([
            {"key": f.key, "name": f.name, "description": f.description}
            for f in FRAMEWORKS.values()
        ], indent=2)

    @mcp.tool
    def list_tones() -> str:
        """List available tones and how each is described to the model."""
        return json.dumps(dict(TONE_DESCRIPTIONS), indent=2)

    @mcp.tool
    def list_languages() -> str:
        """List supported response languages."""
        return json.dumps([
            {"code": code, "name": name, "quality_note": code in LANGUAGE_QUALITY_NOTES}
            for code, name in LANGUAGES.items()
        ], indent=2, ensure_ascii=False)

    @mcp.tool
    def list_starters() -> str:
        """List quick-start request templates."""
        starters = engine.starters.all() if engine.starters is not None else []
        return json.dumps([
            {"id": s.id, "name": s.name, "input": s.input, "variables": s.variables}
            for s in starters
        ], indent=2)

    @mcp.tool
    def use_starter(starter_id: str) -> str:
        """Load a starter template: its request plus empty slots for its variables.

        Args:
            starter_id: Id from list_starters, e.g. "blog_post".
        """
        try:
            selection = engine.starter(starter_id)
        except StarterNotFoundError as exc:
            raise ValueError(str(exc)) from exc
        return json.dumps({
            "starter_id": selection.starter_id,
            "request": selection.input,
            "custom_vars": selection.custom_vars,
        }, indent=2)

    @mcp.tool
    def export_prompt(
        text: str,
        filename: str = PROMPT_FILENAME,
        plain: bool = False,
    ) -> str:
        """Save a prompt or preview to a .txt file in the export directory.

        Args:
            text: The content to save.
            filename: File name only (e.g. "prompt.txt" or "ai-response.txt").
            plain: Strip Markdown ** and ## markers first.
        """
        path = export_text(text, settings.export_dir, filename, plain=plain)
        return json.dumps({"status": "ok", "path": str(path)})
