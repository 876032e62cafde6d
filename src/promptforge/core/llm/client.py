"""Preview client — loads a local model and streams generated prompts through it."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, AsyncIterator

from promptforge.core.llm.catalog import get_model_info
from promptforge.core.llm.provider import InferenceProvider, ModelLoadError, ProviderError

logger = logging.getLogger(__name__)


class ModelNotReadyError(ProviderError):
    """Raised when a preview is requested before a model is ready."""


@dataclass
class ModelStatus:
    """Load state shown next to the model picker."""

    model_id: str | None = None
    ready: bool = False
    loading: bool = False
    text: str = ""
    progress: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class PreviewResult:
    """A completed preview. On failure ``content`` carries the error text."""

    content: str
    model: str | None
    ok: bool = True
    chunks: int = 0
    latency_ms: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class PreviewClient:
    """Owns the model lifecycle and serializes previews, one at a time."""

    def __init__(
        self,
        provider: InferenceProvider,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> None:
        self.provider = provider
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._status = ModelStatus()
        self._lock = asyncio.Lock()

    @property
    def status(self) -> ModelStatus:
        return ModelStatus(**asdict(self._status))

    @property
    def ready(self) -> bool:
        return self._status.ready

    async def load(self, model_id: str) -> ModelStatus:
        """Make ``model_id`` ready. Failures are reported in the returned status.

        A load requested while another is in flight is ignored. Switching to a
        different model unloads the current one first.
        """
        if self._status.loading:
            logger.info("Model load already in progress (%s); ignoring %s",
                        self._status.model_id, model_id)
            return self.status
        if self._status.ready and self._status.model_id == model_id:
            return self.status
        if self._status.ready:
            await self.unload()

        if get_model_info(model_id) is None:
            logger.warning("Model %s is not in the catalog; trying it anyway", model_id)

        self._status = ModelStatus(model_id=model_id, loading=True, text="Initializing...")
        start = time.monotonic()
        try:
            await self.provider.load(model_id)
        except ModelLoadError as exc:
            logger.error("Failed to load model %s: %s", model_id, exc)
            self._status = ModelStatus(model_id=model_id, text=f"Error: {exc}")
            return self.status

        self._status = ModelStatus(model_id=model_id, ready=True, text="Ready!", progress=100)
        logger.info("Model %s ready in %.0fms", model_id, (time.monotonic() - start) * 1000)
        return self.status

    async def unload(self) -> None:
        """Release the current model. Best-effort: provider errors are logged."""
        if self._status.model_id is None:
            return
        try:
            await self.provider.unload()
        except Exception as exc:
            logger.warning("Error while unloading model %s: %s", self._status.model_id, exc)
        logger.info("Model %s unloaded", self._status.model_id)
        self._status = ModelStatus()

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        """Yield text deltas for ``prompt``. Raises ModelNotReadyError without a model."""
        if not self._status.ready:
            raise ModelNotReadyError("No model loaded")
        async with self._lock:
            async for delta in self.provider.stream_complete(
                prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            ):
                yield delta

    async def preview(self, prompt: str) -> PreviewResult:
        """Run ``prompt`` to completion and collect the streamed text."""
        model = self._status.model_id
        parts: list[str] = []
        start = time.monotonic()
        try:
            async for delta in self.stream(prompt):
                parts.append(delta)
        except ProviderError as exc:
            logger.warning("Preview failed on model %s: %s", model, exc)
            return PreviewResult(
                content=f"Error: {exc}",
                model=model,
                ok=False,
                chunks=len(parts),
                latency_ms=(time.monotonic() - start) * 1000,
            )

        elapsed_ms = (time.monotonic() - start) * 1000
        content = "".join(parts)
        logger.info(
            "Preview call: model=%s, chunks=%d, chars=%d, latency=%.0fms",
            model,
            len(parts),
            len(content),
            elapsed_ms,
        )
        return PreviewResult(content=content, model=model, chunks=len(parts), latency_ms=elapsed_ms)
