"""MCP Prompts — pre-built interaction templates for the prompt workflow."""

from __future__ import annotations

from fastmcp import FastMCP


def register_forge_prompts(mcp: FastMCP) -> None:
    """Register PromptForge MCP prompts."""

    @mcp.prompt()
    def forge_prompt_request(request: str, framework: str = "rtf") -> str:
        """Walk through analyzing, generating and previewing a prompt."""
        return f"""I want a well-structured prompt for this request:

"{request}"

Please:
1. Run analyze_prompt on it and tell me the score and tips
2. If any [bracketed] variables were detected, ask me for their values
3. Run generate_prompt with framework "{framework}" and my values
4. If a preview model is ready, run preview_prompt on the result

Keep your commentary short; I mostly want the final prompt."""
