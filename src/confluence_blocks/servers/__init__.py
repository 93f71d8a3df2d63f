"""MCP server exposing the Confluence blocks as tools."""

from .main import main_mcp

__all__ = ["main_mcp"]
