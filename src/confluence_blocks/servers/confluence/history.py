"""Confluence page history and hierarchy tools - versions and child pages."""

from fastmcp import Context

from confluence_blocks.models.inputs import GetChildPagesInput, GetVersionsInput

from ._server import confluence_mcp, run_block


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_versions(ctx: Context, params: GetVersionsInput) -> str:
    """List the versions of a Confluence page."""
    return await run_block(ctx, "getVersions", params)


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_child_pages(ctx: Context, params: GetChildPagesInput) -> str:
    """List the direct children of a Confluence page."""
    return await run_block(ctx, "getChildPages", params)
