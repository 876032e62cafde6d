"""Static lookup tables for the prompt engine.

Everything here is built once at import time and exposed read-only.
Declaration order is significant: the classifier walks task types and
subtypes in the order they appear below, and the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class TaskPattern:
    """Trigger keywords for one task type and its ordered subtypes."""

    keywords: tuple[str, ...]
    subtypes: Mapping[str, tuple[str, ...]]


@dataclass(frozen=True)
class FrameworkInfo:
    """Display metadata for a prompt framework."""

    key: str
    name: str
    description: str


DEFAULT_TASK_TYPE = "writing"
DEFAULT_SUBTYPE = "default"
FALLBACK_ROLE = "a helpful expert"

DEFAULT_FRAMEWORK = "rtf"
DEFAULT_TONE = "professional"
DEFAULT_LANGUAGE = "en"
DEFAULT_LENGTH = 50


def _pattern(keywords: tuple[str, ...], **subtypes: tuple[str, ...]) -> TaskPattern:
    return TaskPattern(keywords=keywords, subtypes=MappingProxyType(dict(subtypes)))


TASK_TAXONOMY: Mapping[str, TaskPattern] = MappingProxyType({
    "writing": _pattern(
        ("write", "draft", "compose", "create", "author"),
        blog=("blog", "article", "post", "content"),
        email=("email", "mail", "message", "letter", "outreach"),
        social=("linkedin", "twitter", "instagram", "social"),
        marketing=("ad", "copy", "marketing", "sales", "promo"),
        technical=("documentation", "docs", "readme", "guide"),
        creative=("story", "poem", "script", "narrative"),
    ),
    "analysis": _pattern(
        ("analyze", "review", "evaluate", "assess", "examine"),
        data=("data", "numbers", "metrics"),
        business=("business", "market", "competitor"),
    ),
    "summarize": _pattern(
        ("summarize", "summary", "condense", "brief", "tldr"),
        document=("document", "report", "paper"),
        meeting=("meeting", "call", "notes"),
    ),
    "explain": _pattern(
        ("explain", "describe", "clarify", "teach", "break down"),
        concept=("concept", "idea", "theory"),
        technical=("code", "technical", "programming"),
    ),
    "generate": _pattern(
        ("generate", "list", "brainstorm", "ideas", "suggest"),
        ideas=("ideas", "concepts", "suggestions"),
        names=("names", "titles", "headlines"),
    ),
    "code": _pattern(
        ("code", "program", "script", "function", "build"),
        web=("web", "website", "html", "react"),
        backend=("api", "server", "database"),
    ),
})

ROLE_TABLE: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "writing": MappingProxyType({
        "blog": "an experienced content strategist and SEO expert",
        "email": "a professional business communication specialist",
        "social": "a social media marketing expert",
        "marketing": "a senior conversion copywriter",
        "technical": "a technical documentation specialist",
        "creative": "a creative writer with engaging style",
        "default": "a skilled professional writer",
    }),
    "analysis": MappingProxyType({"default": "an analytical expert with data expertise"}),
    "summarize": MappingProxyType({"default": "a professional editor skilled at synthesis"}),
    "explain": MappingProxyType({"default": "an educator who makes complex ideas simple"}),
    "generate": MappingProxyType({"default": "a creative strategist and ideation expert"}),
    "code": MappingProxyType({"default": "a senior software developer"}),
})

TONE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "professional": "professional, clear, and business-appropriate",
    "casual": "casual, friendly, and conversational",
    "persuasive": "persuasive, compelling, and action-oriented",
    "academic": "academic, formal, and well-researched",
    "creative": "creative, engaging, and unique",
    "friendly": "warm, approachable, and helpful",
})

LANGUAGES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "pt": "Portuguese",
    "zh": "Chinese",
    "ja": "Japanese",
    "bn": "Bengali (বাংলা)",
})

# Hand-written per-language guidance. Only languages listed here get an extra
# quality line; adding a language to LANGUAGES does not add one.
LANGUAGE_QUALITY_NOTES: Mapping[str, str] = MappingProxyType({
    "bn": (
        "**Bangla Quality:** Use natural, fluent Bangla with correct grammar and "
        "punctuation. Avoid repetition, garbled words, or mixed-language fragments."
    ),
})

FRAMEWORKS: Mapping[str, FrameworkInfo] = MappingProxyType({
    "rtf": FrameworkInfo("rtf", "RTF", "Role, Task, Format"),
    "care": FrameworkInfo("care", "CARE", "Context, Action, Result, Example"),
    "risen": FrameworkInfo("risen", "RISEN", "Role, Instructions, Steps, End, Narrowing"),
    "cot": FrameworkInfo("cot", "Chain of Thought", "Step-by-step reasoning"),
    "fewshot": FrameworkInfo("fewshot", "Few-Shot", "Learning from examples"),
})


def all_task_keywords() -> tuple[str, ...]:
    """Every task-type trigger keyword, in declaration order."""
    return tuple(kw for pattern in TASK_TAXONOMY.values() for kw in pattern.keywords)
