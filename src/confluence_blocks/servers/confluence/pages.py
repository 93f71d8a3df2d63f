"""Confluence page tools - create, update, get, delete and list pages."""

from fastmcp import Context

from confluence_blocks.models.inputs import (
    CreatePageInput,
    DeletePageInput,
    GetPageInput,
    ListPagesInput,
    UpdatePageInput,
)
from confluence_blocks.utils.decorators import check_write_access

from ._server import confluence_mcp, run_block


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def create_page(ctx: Context, params: CreatePageInput) -> str:
    """Create a new Confluence page.

    Args:
        ctx: The FastMCP context.
        params: Space ID, title and optional parent, status and body.

    Returns:
        JSON string with the created page.
    """
    return await run_block(ctx, "createPage", params)


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def update_page(ctx: Context, params: UpdatePageInput) -> str:
    """Update an existing Confluence page.

    `versionNumber` must be the page's current version; Confluence rejects
    stale versions.

    Args:
        ctx: The FastMCP context.
        params: Page ID, current version number and the fields to change.

    Returns:
        JSON string with the updated page.
    """
    return await run_block(ctx, "updatePage", params)


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_page(ctx: Context, params: GetPageInput) -> str:
    """Get a Confluence page by ID, optionally with labels, properties,
    operations, likes and versions.
    """
    return await run_block(ctx, "getPage", params)


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def delete_page(ctx: Context, params: DeletePageInput) -> str:
    """Move a Confluence page to the trash, or purge it permanently."""
    return await run_block(ctx, "deletePage", params)


@confluence_mcp.tool(tags={"confluence", "read"})
async def list_pages(ctx: Context, params: ListPagesInput) -> str:
    """List Confluence pages with filters.

    Returns one page of results. Pass `nextCursor` from the response as
    `cursor` to fetch the next one.
    """
    return await run_block(ctx, "listPages", params)
