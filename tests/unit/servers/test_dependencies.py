"""Unit tests for server dependencies module."""

from __future__ import annotations

import pytest

from confluence_blocks.confluence import ConfluenceConfig
from confluence_blocks.servers.context import MainAppContext
from confluence_blocks.servers.dependencies import get_confluence_config
from tests.utils.mocks import MockFastMCP

# Configure pytest for async tests
pytestmark = pytest.mark.anyio


@pytest.fixture
def confluence_config():
    return ConfluenceConfig(
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="test_token",
    )


class TestGetConfluenceConfig:
    """Tests for get_confluence_config function."""

    async def test_returns_config_from_lifespan(self, confluence_config):
        ctx = MockFastMCP.create_context(
            MainAppContext(full_confluence_config=confluence_config)
        )

        result = await get_confluence_config(ctx)

        assert result is confluence_config

    async def test_missing_config_raises(self, caplog):
        ctx = MockFastMCP.create_context(MainAppContext())

        with pytest.raises(ValueError, match="Confluence configuration not available"):
            await get_confluence_config(ctx)

        assert "could not be resolved" in caplog.text

    async def test_missing_app_context_raises(self):
        ctx = MockFastMCP.create_context()
        ctx.request_context.lifespan_context = {}

        with pytest.raises(ValueError, match="Confluence configuration not available"):
            await get_confluence_config(ctx)

    async def test_non_dict_lifespan_context_raises(self):
        ctx = MockFastMCP.create_context()
        ctx.request_context.lifespan_context = None

        with pytest.raises(ValueError):
            await get_confluence_config(ctx)
