"""Confluence blocks.

One module per category:
- pages.py: createPage, updatePage, getPage, deletePage, listPages
- spaces.py: getSpaces
- comments.py: createFooterComment, createInlineComment
- versions.py: getVersions
- children.py: getChildPages
"""

# Import all block modules to register them in BLOCKS
from . import children, comments, pages, spaces, versions  # noqa: F401
from .base import BLOCKS, Block, block
from .children import get_child_pages
from .comments import create_footer_comment, create_inline_comment
from .pages import create_page, delete_page, get_page, list_pages, update_page
from .spaces import get_spaces
from .versions import get_versions

__all__ = [
    "BLOCKS",
    "Block",
    "block",
    # Pages
    "create_page",
    "update_page",
    "get_page",
    "delete_page",
    "list_pages",
    # Spaces
    "get_spaces",
    # Comments
    "create_footer_comment",
    "create_inline_comment",
    # Versions
    "get_versions",
    # Children
    "get_child_pages",
]
