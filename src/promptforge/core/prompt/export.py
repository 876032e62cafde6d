"""Copy/download helpers for generated prompts and previews."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROMPT_FILENAME = "prompt.txt"


def to_plain_text(text: str) -> str:
    """Strip Markdown bold and heading markers for pasting into plain fields."""
    return text.replace("**", "").replace("##", "")


def export_text(
    text: str,
    directory: str | Path,
    filename: str = PROMPT_FILENAME,
    *,
    plain: bool = False,
) -> Path:
    """Write text to ``directory/filename`` and return the path.

    Only the basename of ``filename`` is used and the suffix is forced to
    ``.txt``, so callers cannot write outside the export directory.
    """
    name = Path(filename).name
    if name in ("", ".", ".."):
        name = PROMPT_FILENAME
    target_dir = Path(directory).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / Path(name).with_suffix(".txt").name

    content = to_plain_text(text) if plain else text
    path.write_text(content, encoding="utf-8")
    logger.info("Exported %d characters to %s", len(content), path)
    return path
