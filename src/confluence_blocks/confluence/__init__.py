"""Confluence API v2 client package."""

from .client import ConfluenceClient, create_confluence_client
from .config import ConfluenceConfig

__all__ = ["ConfluenceClient", "ConfluenceConfig", "create_confluence_client"]
