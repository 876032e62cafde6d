"""Bracketed placeholder handling: ``[topic]``, ``[product/service]``, ..."""

from __future__ import annotations

import re
from typing import Mapping

_PLACEHOLDER = re.compile(r"\[([^\]]+)\]")


def extract_variables(user_input: str) -> list[str]:
    """Return the inner text of every ``[...]`` span, in order, duplicates kept."""
    return _PLACEHOLDER.findall(user_input)


def substitute_variables(user_input: str, custom_vars: Mapping[str, str]) -> str:
    """Replace ``[key]`` (case-insensitive) with its value for every non-empty value.

    Keys with an empty value are skipped so the placeholder stays visible in
    the rendered prompt.
    """
    processed = user_input
    for key, value in custom_vars.items():
        if not value:
            continue
        pattern = re.compile(r"\[" + re.escape(key) + r"\]", re.IGNORECASE)
        processed = pattern.sub(lambda _m, v=value: v, processed)
    return processed
