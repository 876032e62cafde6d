"""MCP Resources for starter and framework discovery."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from promptforge.core.prompt.taxonomy import FRAMEWORKS, TONE_DESCRIPTIONS

if TYPE_CHECKING:
    from promptforge.core.starter.registry import StarterRegistry


def register_catalog_resources(mcp: FastMCP, registry: StarterRegistry) -> None:
    """Register starter and framework discovery resources on the MCP server."""

    @mcp.resource("starter://registry")
    def starter_registry_resource() -> str:
        """Discover all available starter templates."""
        starters = registry.all()
        return json.dumps(
            {
                "starter_count": len(starters),
                "starters": [
                    {
                        "id": s.id,
                        "name": s.name,
                        "input": s.input,
                        "variables": s.variables,
                    }
                    for s in starters
                ],
            },
            indent=2,
        )

    @mcp.resource("framework://catalog")
    def framework_catalog_resource() -> str:
        """Discover prompt frameworks and tones."""
        return json.dumps(
            {
                "frameworks": [
                    {"key": f.key, "name": f.name, "description": f.description}
                    for f in FRAMEWORKS.values()
                ],
                "tones": list(TONE_DESCRIPTIONS),
            },
            indent=2,
        )
