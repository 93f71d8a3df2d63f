"""Tool filtering helpers."""

import logging
import os

logger = logging.getLogger(__name__)


def get_enabled_tools() -> list[str] | None:
    """Read the ENABLED_TOOLS environment variable.

    Returns:
        List of tool names, or None when every tool is enabled
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        logger.debug("ENABLED_TOOLS not set, all tools enabled")
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",") if tool.strip()]
    logger.debug(f"Enabled tools: {tools}")
    return tools


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check whether a tool passes the ENABLED_TOOLS filter."""
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools
