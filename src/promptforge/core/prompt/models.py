"""Data models for the prompt engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping

from promptforge.core.prompt.taxonomy import (
    DEFAULT_FRAMEWORK,
    DEFAULT_LANGUAGE,
    DEFAULT_LENGTH,
    DEFAULT_TONE,
)

FrameworkKey = Literal["rtf", "care", "risen", "cot", "fewshot"]
ToneKey = Literal["professional", "casual", "persuasive", "academic", "creative", "friendly"]


@dataclass(frozen=True)
class TaskClassification:
    """Coarse and fine classification of a request."""

    task_type: str
    subtype: str


@dataclass(frozen=True)
class ScoreResult:
    """Prompt strength score (0-100) with at most three improvement tips."""

    score: int
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationOptions:
    """User-selected options for one generation request.

    ``framework``, ``tone`` and ``language`` are plain strings: unknown keys
    are accepted and fall back to defaults during assembly.
    """

    framework: str = DEFAULT_FRAMEWORK
    tone: str = DEFAULT_TONE
    length: int = DEFAULT_LENGTH
    language: str = DEFAULT_LANGUAGE
    custom_vars: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze a private copy so later edits to the caller's dict can't leak in.
        object.__setattr__(self, "custom_vars", MappingProxyType(dict(self.custom_vars)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "framework": self.framework,
            "tone": self.tone,
            "length": self.length,
            "language": self.language,
            "custom_vars": dict(self.custom_vars),
        }


@dataclass(frozen=True)
class InputAnalysis:
    """Live feedback on a raw request before generation."""

    score: int
    tips: tuple[str, ...]
    variables: tuple[str, ...]
    task_type: str
    subtype: str
    word_count: int


@dataclass(frozen=True)
class GeneratedPrompt:
    """The assembled prompt plus what the engine decided along the way."""

    text: str
    task_type: str
    subtype: str
    role: str
    options: GenerationOptions
    history_id: int | None = None


@dataclass(frozen=True)
class StarterSelection:
    """Input and blank variable slots produced by applying a starter template."""

    starter_id: str
    input: str
    custom_vars: dict[str, str]
