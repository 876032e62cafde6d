"""PromptForge MCP Server — application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from fastmcp import FastMCP

from promptforge.core.config.settings import get_settings
from promptforge.core.llm.client import PreviewClient
from promptforge.core.llm.provider import InferenceProvider, create_provider
from promptforge.core.prompt.engine import PromptEngine
from promptforge.core.starter.loader import STARTER_DIR, load_starter_directory
from promptforge.core.starter.registry import StarterRegistry
from promptforge.core.storage.database import HistoryDatabase
from promptforge.core.storage.repository import HistoryRepository
from promptforge.prompts.forge_prompts import register_forge_prompts
from promptforge.resources.catalog import register_catalog_resources
from promptforge.tools.preview_tools import register_preview_tools
from promptforge.tools.prompt_tools import register_prompt_tools

logger = logging.getLogger(__name__)

__version__ = "0.1.0"


def create_app(
    *,
    provider_override: InferenceProvider | None = None,
    repository_override: HistoryRepository | None = None,
    starter_dir: str | Path | None = None,
) -> FastMCP:
    """Create and configure the PromptForge MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Loads starter templates into a registry
    3. Opens the prompt history store (continues without it on failure)
    4. Creates the preview client for the configured inference provider
    5. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        "PromptForge",
        instructions=(
            "Turns short natural-language requests into structured LLM prompts "
            "(RTF, CARE, RISEN, Chain-of-Thought, Few-Shot), scores request quality, "
            "and previews prompts on a locally served small model."
        ),
    )

    # --- Starter templates ---
    registry = StarterRegistry()
    directory = Path(starter_dir) if starter_dir is not None else STARTER_DIR
    starter_count = load_starter_directory(directory, registry)
    logger.info("Loaded %d starters from %s", starter_count, directory)

    # --- History store ---
    repository: HistoryRepository | None = None
    if repository_override is not None:
        repository = repository_override
    else:
        try:
            history_db = HistoryDatabase(settings.db_path)
            history_db.initialize()
            repository = HistoryRepository(history_db, limit=settings.history_limit)
        except (sqlite3.Error, OSError) as exc:
            logger.error("Failed to initialize history store: %s", exc)
            logger.warning("Continuing without history — prompts will not be recorded")

    engine = PromptEngine(starters=registry, history=repository)

    # --- Preview model ---
    if provider_override is not None:
        provider = provider_override
        provider_name = type(provider_override).__name__
        default_model = settings.openai_model
    else:
        if settings.llm_provider == "mock":
            provider_name, api_key, base_url = "mock", "", ""
            default_model = settings.openai_model
        elif settings.llm_provider == "openai":
            api_key = settings.openai_api_key
            base_url = settings.openai_base_url
            default_model = settings.openai_model
            provider_name = "openai" if (api_key or base_url) else "mock"
        elif settings.llm_provider == "anthropic":
            api_key = settings.anthropic_api_key
            base_url = ""
            default_model = settings.anthropic_model
            provider_name = "anthropic" if api_key else "mock"
        else:  # pragma: no cover
            raise ValueError(f"Unknown inference provider: {settings.llm_provider!r}")

        if provider_name == "mock" and settings.llm_provider != "mock":
            logger.warning(
                "Provider '%s' is not configured; falling back to mock provider",
                settings.llm_provider,
            )
        provider = create_provider(provider_name=provider_name, api_key=api_key, base_url=base_url)

    preview_client = PreviewClient(
        provider,
        max_tokens=settings.preview_max_tokens,
        temperature=settings.preview_temperature,
    )

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        status = {
            "status": "ok",
            "server": "PromptForge",
            "version": __version__,
            "starters_loaded": starter_count,
            "inference_provider": provider_name,
            "model_ready": preview_client.ready,
            "history_enabled": repository is not None,
        }
        if repository is not None:
            status["history_entries"] = repository.count_entries()
        return status

    register_prompt_tools(server, engine, settings)
    register_preview_tools(server, preview_client, default_model)

    if repository is not None:
        from promptforge.tools.history_tools import register_history_tools

        register_history_tools(server, engine, repository)
        logger.info("History tools registered")

    # --- Register resources ---
    register_catalog_resources(server, registry)

    # --- Register prompts ---
    register_forge_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
