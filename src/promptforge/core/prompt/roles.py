"""Role resolver — persona lookup for a classified request."""

from __future__ import annotations

from promptforge.core.prompt.taxonomy import DEFAULT_SUBTYPE, FALLBACK_ROLE, ROLE_TABLE


def resolve_role(task_type: str, subtype: str) -> str:
    """Exact (task_type, subtype) entry, then the task's default, then a global fallback."""
    roles = ROLE_TABLE.get(task_type)
    if not roles:
        return FALLBACK_ROLE
    return roles.get(subtype) or roles.get(DEFAULT_SUBTYPE) or FALLBACK_ROLE
