"""PromptForge server entry point — ``python -m promptforge.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from promptforge.core.config.settings import Settings, get_settings
from promptforge.core.server.app import create_app
from promptforge.core.starter.loader import STARTER_DIR
from promptforge.core.starter.validator import validate_starter_directory

logger = logging.getLogger(__name__)

LOOPBACK_NAMES = frozenset({"localhost", "localhost.localdomain"})


def is_loopback_host(host: str) -> bool:
    """True for names and addresses that only accept local connections."""
    if host.lower() in LOOPBACK_NAMES:
        return True
    try:
        return ip_address(host.strip("[]")).is_loopback
    except ValueError:
        return False


def check_bind(settings: Settings) -> None:
    """Refuse a public bind unless explicitly allowed; there is no auth layer."""
    if is_loopback_host(settings.forge_host):
        return
    if not settings.forge_allow_insecure_bind:
        raise RuntimeError(
            f"Refusing to serve PromptForge on non-loopback host {settings.forge_host!r}. "
            "Set FORGE_ALLOW_INSECURE_BIND=true to override (unsafe)."
        )
    logger.warning("Serving on %s without authentication", settings.forge_host)


def report_starter_problems() -> int:
    """Log validation errors in the bundled starters; return how many were found."""
    count, errors = validate_starter_directory(STARTER_DIR)
    for error in errors:
        logger.warning("Starter problem: %s", error)
    logger.debug("Validated %d starter file(s)", count)
    return len(errors)


def run() -> None:
    """Start the PromptForge MCP server with Streamable HTTP transport."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.forge_log_level.upper(), logging.INFO))

    check_bind(settings)
    report_starter_problems()

    logger.info(
        "Starting PromptForge on %s:%d (preview provider: %s)",
        settings.forge_host,
        settings.forge_port,
        settings.llm_provider,
    )
    create_app().run(
        transport="streamable-http",
        host=settings.forge_host,
        port=settings.forge_port,
    )


if __name__ == "__main__":
    run()
