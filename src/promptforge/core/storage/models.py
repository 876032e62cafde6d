"""Data models for the history persistence layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class HistoryEntry:
    """One generated prompt, as shown in the history panel."""

    id: int  # creation time, epoch milliseconds
    input: str
    output: str
    framework: str
    tone: str
    created_at: str  # ISO 8601

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
