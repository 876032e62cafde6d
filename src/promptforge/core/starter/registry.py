"""Starter registry — in-memory index for loaded starter templates."""

from __future__ import annotations

import logging

from promptforge.core.starter.models import StarterTemplate

logger = logging.getLogger(__name__)


class StarterRegistry:
    """In-memory registry of all loaded starter templates, in load order."""

    def __init__(self) -> None:
        self._starters: dict[str, StarterTemplate] = {}

    def register(self, starter: StarterTemplate) -> None:
        """Add a starter; ids must be unique."""
        if starter.id in self._starters:
            raise ValueError(f"Duplicate starter id registered: {starter.id!r}")
        self._starters[starter.id] = starter

    def get(self, starter_id: str) -> StarterTemplate | None:
        """Look up a starter by ID."""
        return self._starters.get(starter_id)

    def all(self) -> list[StarterTemplate]:
        """Return all registered starters."""
        return list(self._starters.values())

    def __len__(self) -> int:
        return len(self._starters)
