"""Confluence space tools - get_spaces."""

from fastmcp import Context

from confluence_blocks.models.inputs import GetSpacesInput

from ._server import confluence_mcp, run_block


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_spaces(ctx: Context, params: GetSpacesInput) -> str:
    """List Confluence spaces.

    Args:
        ctx: The FastMCP context.
        params: Filters, sort order and pagination cursor.

    Returns:
        JSON string with the spaces, `hasMore` and `nextCursor`.
    """
    return await run_block(ctx, "getSpaces", params)
