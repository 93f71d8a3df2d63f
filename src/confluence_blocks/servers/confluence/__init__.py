"""Confluence MCP server package.

This package contains the Confluence MCP server and one tool per block:
- _server.py: FastMCP instance and run_block
- pages.py: create_page, update_page, get_page, delete_page, list_pages
- spaces.py: get_spaces
- comments.py: create_footer_comment, create_inline_comment
- history.py: get_versions, get_child_pages
- status.py: check_connection, list_blocks
"""

# Import all tool modules to register them with confluence_mcp
from . import comments, history, pages, spaces, status  # noqa: F401
from ._server import confluence_mcp, run_block
from .comments import create_footer_comment, create_inline_comment
from .history import get_child_pages, get_versions
from .pages import create_page, delete_page, get_page, list_pages, update_page
from .spaces import get_spaces
from .status import check_connection, list_blocks

__all__ = [
    "confluence_mcp",
    "run_block",
    "create_page",
    "update_page",
    "get_page",
    "delete_page",
    "list_pages",
    "get_spaces",
    "create_footer_comment",
    "create_inline_comment",
    "get_versions",
    "get_child_pages",
    "check_connection",
    "list_blocks",
]
