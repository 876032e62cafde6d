"""Starter YAML validator — ensures starter definitions are well-formed."""

from __future__ import annotations

import logging
from pathlib import Path

from promptforge.core.prompt.variables import extract_variables
from promptforge.core.starter.loader import load_starter_file
from promptforge.core.starter.models import StarterTemplate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["id", "name", "input"]


def validate_starter_file(path: Path) -> tuple[StarterTemplate | None, list[str]]:
    """Validate a single starter YAML file.

    Returns: (starter_or_none, errors)
    """
    errors: list[str] = []

    try:
        starter = load_starter_file(path)
    except Exception as exc:
        return None, [f"{path}: Failed to load — {exc}"]

    for field_name in REQUIRED_FIELDS:
        if not getattr(starter, field_name, None):
            errors.append(f"{path}: Missing or empty required field '{field_name}'")

    if not starter.variables:
        errors.append(f"{path}: No variables declared")
    else:
        # The input must expose at least one declared slot, otherwise filling
        # the variables has no visible effect.
        placeholders = {p.lower() for p in extract_variables(starter.input)}
        if not placeholders & {v.lower() for v in starter.variables}:
            errors.append(f"{path}: Input contains none of the declared variables")

    if path.name != f"{starter.id}.yaml":
        errors.append(
            f"{path}: Filename '{path.name}' should match starter id '{starter.id}'"
        )

    return starter, errors


def validate_starter_directory(directory: str | Path) -> tuple[int, list[str]]:
    """Validate all starter YAML files in a directory (recursively).

    Returns: (starter_count, errors)
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0, [f"Starter directory not found: {directory}"]

    yaml_files = sorted(p for p in directory.rglob("*.yaml") if not p.name.startswith("_"))
    if not yaml_files:
        return 0, [f"No starter YAML files found in {directory}"]

    errors: list[str] = []
    seen_ids: dict[str, Path] = {}
    loaded = 0

    for path in yaml_files:
        starter, file_errors = validate_starter_file(path)
        if file_errors:
            errors.extend(file_errors)
            continue

        assert starter is not None  # for type checkers
        loaded += 1

        if starter.id in seen_ids:
            errors.append(
                f"{path}: Duplicate ID '{starter.id}' — already defined in {seen_ids[starter.id]}"
            )
        else:
            seen_ids[starter.id] = path

    return loaded, errors
