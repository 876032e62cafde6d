"""OpenAI-compatible provider (local ``mlc_llm serve``, llama.cpp, Ollama, or OpenAI)."""

from __future__ import annotations

import logging
from typing import AsyncIterator

from promptforge.core.llm.provider import ModelLoadError, ProviderError

logger = logging.getLogger(__name__)

# Local OpenAI-compatible servers ignore the key but the SDK requires one.
_LOCAL_API_KEY = "local"


class OpenAIProvider:
    """Streams chat completions through the OpenAI SDK."""

    def __init__(self, api_key: str = "", base_url: str | None = None) -> None:
        import openai

        self._openai = openai
        self.client = openai.AsyncOpenAI(api_key=api_key or _LOCAL_API_KEY, base_url=base_url)
        self.model: str | None = None

    async def load(self, model_id: str) -> None:
        try:
            await self.client.models.retrieve(model_id)
        except self._openai.OpenAIError as exc:
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
            stream = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
                stream=True,
            )
            async for chunk in stream:
                delta = chunk.choices[0].delta.content if chunk.choices else None
                if delta:
                    yield delta
        except self._openai.OpenAIError as exc:
            raise ProviderError(str(exc)) from exc

    async def unload(self) -> None:
        self.model = None
