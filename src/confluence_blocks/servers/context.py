from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from confluence_blocks.app import SyncResult
    from confluence_blocks.confluence.config import ConfluenceConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Confluence configuration loaded from environment
    variables at server startup, and the result of the startup health check.
    """

    full_confluence_config: ConfluenceConfig | None = None
    sync_result: SyncResult | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
