"""Data models for starter templates."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class StarterTemplate:
    """A pre-written request with the placeholders a user is expected to fill."""

    id: str
    name: str
    input: str
    variables: list[str] = field(default_factory=list)
