"""Main FastMCP server setup for the Confluence blocks."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import Tool as MCPTool

from confluence_blocks.app import app
from confluence_blocks.confluence.config import ConfluenceConfig
from confluence_blocks.utils.environment import get_available_services
from confluence_blocks.utils.io import is_read_only_mode
from confluence_blocks.utils.tools import get_enabled_tools, should_include_tool

from .confluence import confluence_mcp
from .context import MainAppContext

logger = logging.getLogger("confluence-blocks.server.main")


@asynccontextmanager
async def main_lifespan(server: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Confluence blocks MCP server lifespan starting...")
    services = get_available_services()
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    loaded_confluence_config: ConfluenceConfig | None = None
    sync_result = None

    if services.get("confluence"):
        try:
            confluence_config = ConfluenceConfig.from_env()
            if confluence_config.is_auth_configured():
                loaded_confluence_config = confluence_config
                logger.info(
                    "Confluence configuration loaded and authentication is configured."
                )
            else:
                logger.warning(
                    "Confluence URL found, but authentication is not fully configured. Confluence tools will be unavailable."
                )
        except Exception as e:
            logger.error(f"Failed to load Confluence configuration: {e}", exc_info=True)

    if loaded_confluence_config:
        sync_result = app.on_sync(loaded_confluence_config)
        logger.info(f"Confluence health check: {sync_result.new_status}")

    app_context = MainAppContext(
        full_confluence_config=loaded_confluence_config,
        sync_result=sync_result,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")

    try:
        yield {"app_lifespan_context": app_context}
    except Exception as e:
        logger.error(f"Error during lifespan: {e}", exc_info=True)
        raise
    finally:
        logger.info("Confluence blocks MCP server lifespan shutdown complete.")


def filter_tools(
    all_tools: dict[str, FastMCPTool], app_lifespan_state: MainAppContext | None
) -> list[tuple[str, FastMCPTool]]:
    """Apply the enabled-tools, read-only and configuration filters."""
    read_only = app_lifespan_state.read_only if app_lifespan_state else False
    enabled_tools_filter = (
        app_lifespan_state.enabled_tools if app_lifespan_state else None
    )
    logger.debug(
        f"filter_tools: read_only={read_only}, enabled_tools_filter={enabled_tools_filter}"
    )

    included: list[tuple[str, FastMCPTool]] = []
    for registered_name, tool_obj in all_tools.items():
        tool_tags = tool_obj.tags

        if not should_include_tool(registered_name, enabled_tools_filter):
            logger.debug(f"Excluding tool '{registered_name}' (not enabled)")
            continue

        if read_only and "write" in tool_tags:
            logger.debug(
                f"Excluding tool '{registered_name}' due to read-only mode and 'write' tag"
            )
            continue

        # Exclude Confluence tools if config is not fully authenticated
        if "confluence" in tool_tags and not (
            app_lifespan_state and app_lifespan_state.full_confluence_config
        ):
            logger.debug(
                f"Excluding Confluence tool '{registered_name}' as Confluence configuration/authentication is incomplete."
            )
            continue

        included.append((registered_name, tool_obj))

    logger.debug(f"filter_tools: Total tools after filtering: {len(included)}")
    return included


class ConfluenceBlocksMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class with tool filtering."""

    async def _mcp_list_tools(self) -> list[MCPTool]:
        req_context = self._mcp_server.request_context
        if req_context is None or req_context.lifespan_context is None:
            logger.warning(
                "Lifespan context not available during _mcp_list_tools call."
            )
            return []

        lifespan_ctx_dict = req_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )

        all_tools: dict[str, FastMCPTool] = await self.get_tools()
        logger.debug(
            f"Aggregated {len(all_tools)} tools before filtering: {list(all_tools.keys())}"
        )

        return [
            tool_obj.to_mcp_tool(name=registered_name)
            for registered_name, tool_obj in filter_tools(all_tools, app_lifespan_state)
        ]


main_mcp = ConfluenceBlocksMCP(name="Confluence Blocks MCP", lifespan=main_lifespan)
main_mcp.mount("confluence", confluence_mcp)
