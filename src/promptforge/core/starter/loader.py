"""Starter loader — reads YAML definitions from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from promptforge.core.starter.models import StarterTemplate
from promptforge.core.starter.registry import StarterRegistry

logger = logging.getLogger(__name__)

# Bundled starters ship inside the package.
STARTER_DIR = Path(__file__).resolve().parent.parent.parent / "starters"


def load_starter_directory(directory: str | Path, registry: StarterRegistry) -> int:
    """Load all YAML starter definitions from a directory (recursively).

    Returns the number of starters loaded.
    Skips files starting with underscore.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Starter directory does not exist: %s", directory)
        return 0

    count = 0
    for path in sorted(directory.rglob("*.yaml")):
        if path.name.startswith("_"):
            continue
        try:
            starter = load_starter_file(path)
            registry.register(starter)
            count += 1
            logger.info("Loaded starter: %s", starter.id)
        except Exception:
            logger.exception("Failed to load starter from %s", path)
    return count


def load_starter_file(path: Path) -> StarterTemplate:
    """Parse a YAML file into a StarterTemplate instance."""
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f)

    return StarterTemplate(
        id=data["id"],
        name=data["name"],
        input=data["input"].strip(),
        variables=[str(v) for v in data.get("variables", [])],
    )
