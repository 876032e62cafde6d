"""Anthropic Claude provider."""

from __future__ import annotations

from typing import AsyncIterator

from promptforge.core.llm.provider import ModelLoadError, ProviderError


class AnthropicProvider:
    """Claude provider using the Anthropic SDK's streaming helper."""

    def __init__(self, api_key: str) -> None:
        import anthropic

        self._anthropic = anthropic
        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model: str | None = None

    async def load(self, model_id: str) -> None:
        try:
            await self.client.models.retrieve(model_id)
        except self._anthropic.AnthropicError as exc:
            raise ModelLoadError(f"Model {model_id!r} is not available: {exc}") from exc
        self.model = model_id

    async def stream_complete(
        self,
        prompt: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> AsyncIterator[str]:
        if self.model is None:
            raise ProviderError("No model loaded")
        try:
            async with self.client.messages.stream(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            ) as stream:
                async for text in stream.text_stream:
                    if text:
                        yield text
        except self._anthropic.AnthropicError as exc:
            raise ProviderError(str(exc)) from exc

    async def unload(self) -> None:
        self.model = None
