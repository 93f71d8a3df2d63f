"""Confluence connection status and block catalogue tools."""

from typing import Any

from fastmcp import Context

from confluence_blocks.app import app
from confluence_blocks.confluence import ConfluenceConfig
from confluence_blocks.servers.context import MainAppContext
from confluence_blocks.servers.dependencies import get_app_context, get_confluence_config

from ._server import confluence_mcp, to_json


def connection_status(
    config: ConfluenceConfig, app_context: MainAppContext | None = None
) -> dict[str, Any]:
    """Run the health check now and add the status recorded at startup."""
    result = app.on_sync(config).to_dict()
    if app_context and app_context.sync_result:
        result["startupStatus"] = app_context.sync_result.new_status
    return result


def describe_blocks(read_only: bool = False) -> list[dict[str, Any]]:
    return [
        block.describe()
        for block in app.blocks.values()
        if not (read_only and block.write)
    ]


@confluence_mcp.tool(tags={"confluence", "read"})
async def check_connection(ctx: Context) -> str:
    """Check that the configured Confluence credentials work.

    Returns:
        JSON string with `newStatus` ("ready" or "failed") and the signals.
        `startupStatus` holds the result of the check run at server startup.
    """
    config = await get_confluence_config(ctx)
    return to_json(connection_status(config, get_app_context(ctx)))


@confluence_mcp.tool(tags={"confluence", "read"})
async def list_blocks(ctx: Context) -> str:
    """List the available blocks with their input and output JSON schemas.

    Write blocks are left out in read-only mode.

    Returns:
        JSON string with one entry per block.
    """
    app_context = get_app_context(ctx)
    return to_json(describe_blocks(app_context.read_only if app_context else False))
