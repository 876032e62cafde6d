"""MCP tools for running generated prompts through the local preview model."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from fastmcp import Context, FastMCP

from promptforge.core.llm.catalog import MODEL_CATALOG

if TYPE_CHECKING:
    from promptforge.core.llm.client import PreviewClient

logger = logging.getLogger(__name__)


def register_preview_tools(mcp: FastMCP, preview_client: PreviewClient, default_model: str) -> None:
    """Register model lifecycle and preview tools."""

    @mcp.tool
    def list_models() -> str:
        """List suggested small models for local previews."""
        return json.dumps({
            "default": default_model,
            "models": [m.to_dict() for m in MODEL_CATALOG],
        }, indent=2)

    @mcp.tool
    def model_status() -> str:
        """Show which preview model is loaded and whether it is ready."""
        return json.dumps(preview_client.status.to_dict(), indent=2)

    @mcp.tool
    async def load_model(ctx: Context, model_id: str = "") -> str:
        """Load a model for previews. Errors are reported in the returned status.

        Args:
            model_id: Model to load (default: the configured model).
        """
        target = model_id or default_model
        await ctx.info(f"Loading preview model {target}")
        status = await preview_client.load(target)
        return json.dumps(status.to_dict(), indent=2)

    @mcp.tool
    async def unload_model() -> str:
        """Release the current preview model."""
        await preview_client.unload()
        return json.dumps(preview_client.status.to_dict(), indent=2)

    @mcp.tool
    async def preview_prompt(ctx: Context, prompt: str) -> str:
        """Run a generated prompt through the loaded model and return its response.

        Args:
            prompt: The prompt text, usually the output of generate_prompt.
        """
        if not prompt.strip():
            raise ValueError("prompt must not be empty")
        result = await preview_client.preview(prompt)
        if not result.ok:
            await ctx.warning(result.content)
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
