"""Tests for the inference provider factory and model catalog."""

from __future__ import annotations

import asyncio
import inspect

import pytest

from promptforge.core.llm.catalog import DEFAULT_MODEL_ID, MODEL_CATALOG, get_model_info
from promptforge.core.llm.provider import InferenceProvider, create_provider
from promptforge.core.llm.providers import AnthropicProvider, MockProvider, OpenAIProvider


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


class TestCreateProvider:
    def test_mock(self):
        provider = create_provider("mock")
        assert isinstance(provider, MockProvider)
        assert isinstance(provider, InferenceProvider)

    def test_openai_with_local_base_url(self):
        provider = create_provider("openai", base_url="http://127.0.0.1:8000/v1")
        assert isinstance(provider, OpenAIProvider)
        assert "127.0.0.1:8000" in str(provider.client.base_url)

    def test_anthropic(self):
        provider = create_provider("anthropic", api_key="test-key")
        assert isinstance(provider, AnthropicProvider)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown inference provider"):
            create_provider("webgpu")

    def test_factory_takes_no_model(self):
        params = list(inspect.signature(create_provider).parameters)
        assert params == ["provider_name", "api_key", "base_url"]

    def test_model_chosen_at_load(self):
        provider = create_provider("mock")
        assert provider.model is None
        _run(provider.load("gemma-2-2b-it-q4f32_1-MLC"))
        assert provider.model == "gemma-2-2b-it-q4f32_1-MLC"


class TestCatalog:
    def test_ids_unique(self):
        ids = [m.id for m in MODEL_CATALOG]
        assert len(ids) == len(set(ids))

    def test_default_is_listed(self):
        assert get_model_info(DEFAULT_MODEL_ID) is not None

    def test_unknown_model(self):
        assert get_model_info("nope") is None
