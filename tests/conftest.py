"""Shared test fixtures for PromptForge tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LLM_PROVIDER", "mock")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.setenv("DB_PATH", ":memory:")
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "exports"))

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from promptforge.core.prompt.engine import PromptEngine  # noqa: E402
from promptforge.core.starter.models import StarterTemplate  # noqa: E402
from promptforge.core.starter.registry import StarterRegistry  # noqa: E402


def make_test_starter(
    id: str = "test_starter",
    input: str = "Write a blog post about [topic] for [audience]",
    variables: list[str] | None = None,
) -> StarterTemplate:
    """Create a test starter with sensible defaults."""
    return StarterTemplate(
        id=id,
        name=f"Test: {id}",
        input=input,
        variables=variables if variables is not None else ["topic", "audience"],
    )


@pytest.fixture
def registry() -> StarterRegistry:
    """Create a registry with two test starters."""
    reg = StarterRegistry()
    reg.register(make_test_starter(id="blog_post"))
    reg.register(make_test_starter(
        id="code_review",
        input="Review this code for [language] and suggest improvements",
        variables=["language", "focus_areas"],
    ))
    return reg


# ---------------------------------------------------------------------------
# In-memory storage fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def history_db():
    """Create an in-memory HistoryDatabase for testing."""
    from promptforge.core.storage.database import HistoryDatabase

    db = HistoryDatabase(":memory:")
    db.initialize()
    yield db
    db.close()


@pytest.fixture
def history_repository(history_db):
    """Create a HistoryRepository backed by in-memory SQLite."""
    from promptforge.core.storage.repository import HistoryRepository

    return HistoryRepository(history_db)


@pytest.fixture
def engine(registry: StarterRegistry, history_repository) -> PromptEngine:
    """Create a prompt engine with test starters and in-memory history."""
    return PromptEngine(starters=registry, history=history_repository)


# ---------------------------------------------------------------------------
# Inference fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_provider():
    from promptforge.core.llm.providers.mock import MockProvider

    return MockProvider(response_content="Here is a short blog post.")


@pytest.fixture
def preview_client(mock_provider):
    from promptforge.core.llm.client import PreviewClient

    return PreviewClient(mock_provider)
