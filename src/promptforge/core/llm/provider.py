"""Inference provider protocol — abstract interface for the preview model."""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable


class ProviderError(Exception):
    """Raised when the inference backend fails while generating."""


class ModelLoadError(ProviderError):
    """Raised when a model cannot be made ready."""


@runtime_checkable
class InferenceProvider(Protocol):
    """Abstract interface for a locally served model.

    ``load`` raises ModelLoadError; ``stream_complete`` yields text deltas
    and raises ProviderError if generation fails part-way.
    """

    async def load(self, model_id: str) -> None: ...

    def stream_complete(
        self,
        prompt: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> AsyncIterator[str]: ...

    async def unload(self) -> None: ...


def create_provider(
    provider_name: str,
    api_key: str = "",
    base_url: str = "",
) -> InferenceProvider:
    """Factory function to create an inference provider by name.

    Args:
        provider_name: "openai", "anthropic", or "mock"
        api_key: API key for the provider (local OpenAI-compatible servers
            usually accept any value).
        base_url: Endpoint override, e.g. a local ``mlc_llm serve`` instance.

    Returns:
        An InferenceProvider instance.
    """
    if provider_name == "openai":
        from promptforge.core.llm.providers.openai import OpenAIProvider

        return OpenAIProvider(api_key=api_key, base_url=base_url or None)
    elif provider_name == "anthropic":
        from promptforge.core.llm.providers.anthropic import AnthropicProvider

        return AnthropicProvider(api_key=api_key)
    elif provider_name == "mock":
        from promptforge.core.llm.providers.mock import MockProvider

        return MockProvider()
    else:
        raise ValueError(f"Unknown inference provider: {provider_name}")
