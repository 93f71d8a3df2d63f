"""Dependency providers for tool functions.

Provides get_app_context and get_confluence_config for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from confluence_blocks.confluence import ConfluenceConfig
from confluence_blocks.servers.context import MainAppContext

logger = logging.getLogger("confluence-blocks.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Returns the MainAppContext stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    return (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )


async def get_confluence_config(ctx: Context) -> ConfluenceConfig:
    """Returns the ConfluenceConfig loaded at server startup.

    Args:
        ctx: The FastMCP context.

    Returns:
        ConfluenceConfig from the lifespan context.

    Raises:
        ValueError: If Confluence is not configured.
    """
    logger.debug(f"get_confluence_config: ENTERED. Context ID: {id(ctx)}")

    app_lifespan_ctx = get_app_context(ctx)

    if app_lifespan_ctx and app_lifespan_ctx.full_confluence_config:
        return app_lifespan_ctx.full_confluence_config

    logger.error("Confluence configuration could not be resolved.")
    raise ValueError(
        "Confluence configuration not available. Ensure server is configured correctly."
    )
