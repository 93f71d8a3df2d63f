"""App definition: configuration schema, signals, blocks and health check."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .blocks import (
    Block,
    create_footer_comment,
    create_inline_comment,
    create_page,
    delete_page,
    get_child_pages,
    get_page,
    get_spaces,
    get_versions,
    list_pages,
    update_page,
)
from .confluence import ConfluenceConfig, create_confluence_client
from .models.constants import AUTH_FAILED_DESCRIPTION, STATUS_FAILED, STATUS_READY
from .utils.logging import mask_sensitive

logger = logging.getLogger("confluence-blocks.app")

INSTALLATION_INSTRUCTIONS = """\
Confluence integration app for managing pages, spaces, and content.

To install:
1. Add your Confluence instance URL (e.g., https://your-domain.atlassian.net)
2. Add your email address
3. Add your Confluence API token (generate from Account Settings > Security > API tokens)
4. Start using the blocks in your flows"""

CONFIG_SCHEMA: dict[str, dict[str, Any]] = {
    "confluenceUrl": {
        "name": "Confluence URL",
        "description": "Your Confluence instance URL (e.g., https://your-domain.atlassian.net)",
        "type": "string",
        "required": True,
    },
    "email": {
        "name": "Email",
        "description": "Your Confluence account email address",
        "type": "string",
        "required": True,
    },
    "apiToken": {
        "name": "API Token",
        "description": "Your Confluence API token (generate from Account Settings > Security > API tokens)",
        "type": "string",
        "required": True,
        "sensitive": True,
    },
}

SIGNALS: dict[str, dict[str, str]] = {
    "userAccountId": {
        "name": "User Account ID",
        "description": "The account ID of the authenticated user",
    },
    "userDisplayName": {
        "name": "User Display Name",
        "description": "Display name of the authenticated user",
    },
}


@dataclass(frozen=True)
class SyncResult:
    """Outcome of the app health check, in the shape the host expects."""

    new_status: str
    signal_updates: dict[str, str] | None = None
    custom_status_description: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.new_status == STATUS_READY

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"newStatus": self.new_status}
        if self.signal_updates is not None:
            result["signalUpdates"] = dict(self.signal_updates)
        if self.custom_status_description is not None:
            result["customStatusDescription"] = self.custom_status_description
        return result


@dataclass(frozen=True)
class App:
    name: str
    installation_instructions: str
    blocks: dict[str, Block]
    config_schema: dict[str, dict[str, Any]] = field(default_factory=dict)
    signals: dict[str, dict[str, str]] = field(default_factory=dict)

    def get_block(self, key: str) -> Block:
        """Look up a block by key.

        Raises:
            KeyError: If no block is registered under ``key``
        """
        try:
            return self.blocks[key]
        except KeyError:
            raise KeyError(f"Unknown block: {key}") from None

    def on_sync(self, app_config: Mapping[str, Any] | ConfluenceConfig) -> SyncResult:
        """Validate the credentials with one cheap read (list one space).

        The configured email is published as both account ID and display
        name; no identity endpoint is queried.
        """
        api_token: str | None = None
        try:
            config = (
                app_config
                if isinstance(app_config, ConfluenceConfig)
                else ConfluenceConfig.from_app_config(app_config)
            )
            api_token = config.api_token

            with create_confluence_client(config) as client:
                client.get("/spaces?limit=1")

            return SyncResult(
                new_status=STATUS_READY,
                signal_updates={
                    "userAccountId": config.email,
                    "userDisplayName": config.email,
                },
            )
        except Exception as e:
            logger.error(
                "Error during Confluence API authentication: "
                + mask_sensitive(str(e) or "Unknown error", [api_token])
            )
            return SyncResult(
                new_status=STATUS_FAILED,
                custom_status_description=AUTH_FAILED_DESCRIPTION,
            )


app = App(
    name="Confluence Integration",
    installation_instructions=INSTALLATION_INSTRUCTIONS,
    blocks={
        # Page Management
        "createPage": create_page,
        "updatePage": update_page,
        "getPage": get_page,
        "deletePage": delete_page,
        "listPages": list_pages,
        # Space Management
        "getSpaces": get_spaces,
        # Comment Management
        "createFooterComment": create_footer_comment,
        "createInlineComment": create_inline_comment,
        # Version Management
        "getVersions": get_versions,
        # Children Management
        "getChildPages": get_child_pages,
    },
    config_schema=CONFIG_SCHEMA,
    signals=SIGNALS,
)
