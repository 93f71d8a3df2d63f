"""Configuration for the Confluence client."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..utils.env import is_env_ssl_verify


@dataclass
class ConfluenceConfig:
    """Confluence Cloud connection settings.

    Handles the instance URL and the email/API token pair used for
    Basic authentication. The token is left out of ``repr()``.
    """

    url: str
    email: str
    api_token: str = field(repr=False)
    ssl_verify: bool = True

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If any required environment variable is missing
        """
        url = os.getenv("CONFLUENCE_URL")
        if not url:
            raise ValueError("Missing required CONFLUENCE_URL environment variable")

        return cls(
            url=url,
            email=os.getenv("CONFLUENCE_USERNAME", ""),
            api_token=os.getenv("CONFLUENCE_API_TOKEN", ""),
            ssl_verify=is_env_ssl_verify("CONFLUENCE_SSL_VERIFY"),
        )

    @classmethod
    def from_app_config(cls, app_config: Mapping[str, Any]) -> "ConfluenceConfig":
        """Create configuration from the host's app-level config.

        Accepts ``confluenceUrl`` or ``instanceUrl`` for the instance URL.

        Raises:
            ValueError: If the URL, email or API token is missing
        """
        url = app_config.get("confluenceUrl") or app_config.get("instanceUrl")
        email = app_config.get("email")
        api_token = app_config.get("apiToken")

        missing = [
            name
            for name, value in (
                ("confluenceUrl", url),
                ("email", email),
                ("apiToken", api_token),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"Missing app configuration: {', '.join(missing)}")

        return cls(
            url=url,
            email=email,
            api_token=api_token,
            ssl_verify=app_config.get("sslVerify", True),
        )

    def is_auth_configured(self) -> bool:
        """Check if the email/API token pair is present."""
        return bool(self.email and self.api_token)
