"""Confluence comment tools - footer and inline comments."""

from fastmcp import Context

from confluence_blocks.models.inputs import (
    CreateFooterCommentInput,
    CreateInlineCommentInput,
)
from confluence_blocks.utils.decorators import check_write_access

from ._server import confluence_mcp, run_block


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def create_footer_comment(ctx: Context, params: CreateFooterCommentInput) -> str:
    """Add a footer comment to a page, or reply to one with `parentCommentId`."""
    return await run_block(ctx, "createFooterComment", params)


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def create_inline_comment(ctx: Context, params: CreateInlineCommentInput) -> str:
    """Add an inline comment attached to selected text on a page.

    Args:
        ctx: The FastMCP context.
        params: Page ID, comment body and the text selection to attach to.

    Returns:
        JSON string with the created comment.
    """
    return await run_block(ctx, "createInlineComment", params)
