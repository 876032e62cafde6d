"""Tests for starter YAML loading, registry indexing and validation."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path

import pytest

from promptforge.core.starter.loader import (
    STARTER_DIR,
    load_starter_directory,
    load_starter_file,
)
from promptforge.core.starter.models import StarterTemplate
from promptforge.core.starter.registry import StarterRegistry
from promptforge.core.starter.validator import validate_starter_directory, validate_starter_file

BUNDLED_IDS = {
    "sales_email",
    "blog_post",
    "code_review",
    "product_description",
    "social_post",
    "explain_concept",
}


def _write(directory: Path, name: str, body: str) -> Path:
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


class TestBundledStarters:
    def test_all_bundled_starters_load(self):
        registry = StarterRegistry()
        count = load_starter_directory(STARTER_DIR, registry)
        assert count == len(BUNDLED_IDS)
        assert {s.id for s in registry.all()} == BUNDLED_IDS

    def test_bundled_starters_validate_cleanly(self):
        count, errors = validate_starter_directory(STARTER_DIR)
        assert errors == []
        assert count == len(BUNDLED_IDS)

    def test_blog_post_contents(self):
        starter = load_starter_file(STARTER_DIR / "blog_post.yaml")
        assert starter.input == "Write a blog post about [topic] for [audience]"
        assert starter.variables == ["topic", "audience", "word_count"]

    def test_template_carries_only_request_fields(self):
        assert [f.name for f in fields(StarterTemplate)] == ["id", "name", "input", "variables"]


class TestLoader:
    def test_missing_directory_loads_nothing(self, tmp_path):
        assert load_starter_directory(tmp_path / "missing", StarterRegistry()) == 0

    def test_underscore_and_broken_files_skipped(self, tmp_path):
        _write(tmp_path, "_schema.yaml", "id: schema\n")
        _write(tmp_path, "broken.yaml", "name: no id here\n")
        _write(tmp_path, "ok.yaml", "id: ok\nname: OK\ninput: Write [x]\nvariables: [x]\n")
        registry = StarterRegistry()
        assert load_starter_directory(tmp_path, registry) == 1
        assert registry.get("ok") is not None


class TestRegistry:
    def test_duplicate_id_rejected(self, registry: StarterRegistry):
        with pytest.raises(ValueError, match="Duplicate"):
            registry.register(registry.get("blog_post"))

    def test_len_and_order(self, registry: StarterRegistry):
        assert len(registry) == 2
        assert [s.id for s in registry.all()] == ["blog_post", "code_review"]


class TestValidator:
    def test_filename_mismatch(self, tmp_path):
        path = _write(tmp_path, "wrong.yaml", "id: right\nname: R\ninput: Write [x]\nvariables: [x]\n")
        _, errors = validate_starter_file(path)
        assert any("should match starter id" in e for e in errors)

    def test_undeclared_placeholder(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "id: s\nname: S\ninput: Write [x]\nvariables: [y]\n")
        _, errors = validate_starter_file(path)
        assert any("none of the declared variables" in e for e in errors)

    def test_no_variables(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "id: s\nname: S\ninput: Write a poem\n")
        _, errors = validate_starter_file(path)
        assert any("No variables declared" in e for e in errors)

    def test_unloadable_file(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "name: S\n")
        starter, errors = validate_starter_file(path)
        assert starter is None
        assert "Failed to load" in errors[0]

    def test_duplicate_ids_across_files(self, tmp_path):
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        body = "id: s\nname: S\ninput: Write [x]\nvariables: [x]\n"
        _write(tmp_path / "a", "s.yaml", body)
        _write(tmp_path / "b", "s.yaml", body)
        count, errors = validate_starter_directory(tmp_path)
        assert count == 2
        assert any("Duplicate ID 's'" in e for e in errors)

    def test_empty_directory(self, tmp_path):
        count, errors = validate_starter_directory(tmp_path)
        assert count == 0
        assert "No starter YAML files" in errors[0]
