"""Tests for PromptEngine — analysis, generation with history, starters."""

from __future__ import annotations

import pytest

from promptforge.core.prompt.engine import EmptyInputError, PromptEngine, StarterNotFoundError
from promptforge.core.prompt.models import GenerationOptions


class TestAnalyze:
    def test_reports_all_signals(self, engine: PromptEngine):
        analysis = engine.analyze("Write a blog post about [topic] for [audience]")
        assert analysis.task_type == "writing"
        assert analysis.subtype == "blog"
        assert analysis.variables == ("topic", "audience")
        assert analysis.word_count == 8
        assert 0 <= analysis.score <= 100

    def test_word_count_ignores_extra_whitespace(self, engine: PromptEngine):
        assert engine.analyze("  one   two\nthree  ").word_count == 3
        assert engine.analyze("   ").word_count == 0


class TestGenerate:
    def test_generates_and_records_history(self, engine: PromptEngine, history_repository):
        result = engine.generate(
            "Write about [topic]",
            GenerationOptions(framework="care", tone="casual", custom_vars={"topic": "dogs"}),
        )
        assert "## Context" in result.text
        assert "dogs" in result.text
        assert result.role == "a skilled professional writer"
        assert result.history_id is not None

        entries = history_repository.load_history()
        assert len(entries) == 1
        assert entries[0].id == result.history_id
        assert entries[0].input == "Write about [topic]"
        assert entries[0].output == result.text
        assert entries[0].framework == "care"
        assert entries[0].tone == "casual"

    def test_blank_input_rejected(self, engine: PromptEngine, history_repository):
        with pytest.raises(EmptyInputError):
            engine.generate("   ")
        assert history_repository.count_entries() == 0

    def test_empty_input_error_is_value_error(self):
        assert issubclass(EmptyInputError, ValueError)

    def test_works_without_history(self):
        result = PromptEngine().generate("Explain gravity")
        assert result.task_type == "explain"
        assert result.history_id is None

    def test_restore_returns_entry(self, engine: PromptEngine):
        result = engine.generate("Summarize the meeting notes")
        entry = engine.restore(result.history_id)
        assert entry is not None
        assert entry.output == result.text

    def test_restore_without_history(self):
        assert PromptEngine().restore(1) is None


class TestStarters:
    def test_starter_blanks_variables(self, engine: PromptEngine):
        selection = engine.starter("code_review")
        assert selection.input == "Review this code for [language] and suggest improvements"
        assert selection.custom_vars == {"language": "", "focus_areas": ""}

    def test_unknown_starter(self, engine: PromptEngine):
        with pytest.raises(StarterNotFoundError):
            engine.starter("nope")

    def test_no_registry(self):
        with pytest.raises(StarterNotFoundError):
            PromptEngine().starter("blog_post")

    def test_starter_then_generate_keeps_unfilled_slots(self, engine: PromptEngine):
        selection = engine.starter("blog_post")
        result = engine.generate(
            selection.input,
            GenerationOptions(custom_vars={**selection.custom_vars, "topic": "solar power"}),
        )
        assert "solar power" in result.text
        assert "[audience]" in result.text
