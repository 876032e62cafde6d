"""Mock inference provider for testing."""

from __future__ import annotations

from typing import AsyncIterator

from promptforge.core.llm.provider import ModelLoadError, ProviderError


class MockProvider:
    """Mock provider for testing — streams a canned response word by word."""

    def __init__(
        self,
        response_content: str = "Mock preview response.",
        *,
        fail_load: str | None = None,
        fail_stream: str | None = None,
        fail_unload: str | None = None,
    ) -> None:
        self.response_content = response_content
        self.fail_load = fail_load
        self.fail_stream = fail_stream
        self.fail_unload = fail_unload
        self.model: str | None = None
        self.last_prompt: str = ""
        self.call_count: int = 0
        self.unload_count: int = 0

    async def load(self, model_id: str) -> None:
        if self.fail_load:
            raise ModelLoadError(self.fail_load)
        self.model = model_id

    async def stream_complete(
        self,
        prompt: str,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> AsyncIterator[str]:
        self.last_prompt = prompt
        self.call_count += 1
        words = self.response_content.split(" ")
        for i, word in enumerate(words):
            if self.fail_stream and i == len(words) // 2:
                raise ProviderError(self.fail_stream)
            yield word if i == 0 else f" {word}"

    async def unload(self) -> None:
        self.unload_count += 1
        if self.fail_unload:
            raise RuntimeError(self.fail_unload)
        self.model = None
