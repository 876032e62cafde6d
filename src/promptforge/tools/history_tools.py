"""MCP tools for browsing and restoring previously generated prompts."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from promptforge.core.prompt.engine import PromptEngine
    from promptforge.core.storage.repository import HistoryRepository

logger = logging.getLogger(__name__)


def register_history_tools(
    mcp: FastMCP,
    engine: PromptEngine,
    repository: HistoryRepository,
) -> None:
    """Register history tools on the MCP server."""

    @mcp.tool
    def list_history() -> str:
        """List recent generated prompts, newest first (at most 20)."""
        entries = repository.load_history()
        return json.dumps({
            "count": len(entries),
            "limit": repository.limit,
            "entries": [
                {
                    "id": e.id,
                    "input": e.input,
                    "framework": e.framework,
                    "tone": e.tone,
                    "created_at": e.created_at,
                }
                for e in entries
            ],
        }, indent=2, ensure_ascii=False)

    @mcp.tool
    def restore_history(entry_id: int) -> str:
        """Reload a past request with its generated prompt, framework and tone.

        Args:
            entry_id: Id from list_history.
        """
        entry = engine.restore(entry_id)
        if entry is None:
            raise ValueError(f"No history entry with id {entry_id}")
        return json.dumps(entry.to_dict(), indent=2, ensure_ascii=False)

    @mcp.tool
    def clear_history() -> str:
        """Delete all stored prompt history."""
        deleted = repository.clear_history()
        return json.dumps({"status": "ok", "deleted": deleted})
