"""Confluence MCP server instance and shared utilities."""

import json
import logging
from typing import Any

from fastmcp import Context, FastMCP

from confluence_blocks.app import app
from confluence_blocks.exceptions import BlockExecutionError
from confluence_blocks.models.base import ApiModel
from confluence_blocks.servers.dependencies import get_confluence_config

logger = logging.getLogger(__name__)

# FastMCP server instance
confluence_mcp = FastMCP(
    name="Confluence Blocks Service",
    instructions="Provides one tool per Confluence block: pages, spaces, comments, versions and child pages.",
)


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


async def run_block(ctx: Context, key: str, params: ApiModel) -> str:
    """Run the block registered under ``key`` and return its event as JSON.

    A block failure is returned as ``{"error": message}`` rather than raised,
    so the caller sees the prefixed message.
    """
    config = await get_confluence_config(ctx)
    block = app.get_block(key)

    try:
        event = block.on_event(config, params)
    except BlockExecutionError as e:
        return to_json({"error": str(e)})

    return to_json(event)
