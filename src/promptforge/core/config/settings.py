"""Application settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """PromptForge server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no auth layer in front of the tools.
    forge_host: str = "127.0.0.1"
    forge_port: int = 8001
    forge_log_level: str = "info"
    forge_allow_insecure_bind: bool = False

    # Preview model
    llm_provider: Literal["openai", "anthropic", "mock"] = "openai"
    # OpenAI-compatible endpoint; defaults to a local `mlc_llm serve`.
    openai_base_url: str = "http://127.0.0.1:8000/v1"
    openai_api_key: str = ""
    openai_model: str = "Llama-3.2-1B-Instruct-q4f32_1-MLC"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    preview_max_tokens: int = 1024
    preview_temperature: float = 0.7

    # History
    db_path: str = "~/.promptforge/history.db"
    history_limit: int = 20

    # Exports
    export_dir: str = "~/.promptforge/exports"

    # Generation defaults
    default_framework: str = "rtf"
    default_tone: str = "professional"
    default_length: int = 50
    default_language: str = "en"


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
