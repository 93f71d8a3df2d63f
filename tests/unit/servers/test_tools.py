"""Unit tests for the Confluence tool helpers."""

import json
from unittest.mock import MagicMock, patch

import pytest

from confluence_blocks.app import SyncResult
from confluence_blocks.confluence import ConfluenceClient, ConfluenceConfig
from confluence_blocks.exceptions import ConfluenceApiError
from confluence_blocks.models.inputs import DeletePageInput, ListPagesInput
from confluence_blocks.servers.confluence._server import run_block, to_json
from confluence_blocks.servers.confluence.status import connection_status, describe_blocks
from confluence_blocks.servers.context import MainAppContext
from confluence_blocks.utils.decorators import check_write_access
from tests.utils.factories import ConfluencePageFactory, PaginatedResponseFactory
from tests.utils.mocks import MockFastMCP

pytestmark = pytest.mark.anyio


@pytest.fixture
def confluence_config():
    return ConfluenceConfig(
        url="https://test.atlassian.net",
        email="test@example.com",
        api_token="test_token",
    )


@pytest.fixture
def mock_client():
    client = MagicMock(spec=ConfluenceClient)
    with patch(
        "confluence_blocks.blocks.base.create_confluence_client", return_value=client
    ):
        yield client


@pytest.fixture
def ctx(confluence_config):
    return MockFastMCP.create_context(
        MainAppContext(full_confluence_config=confluence_config)
    )


class TestRunBlock:
    async def test_returns_event_json(self, ctx, mock_client):
        mock_client.delete.return_value = None

        result = json.loads(
            await run_block(ctx, "deletePage", DeletePageInput(page_id="456", purge=True))
        )

        assert result == {
            "pageId": "456",
            "deleted": True,
            "purged": True,
            "message": "Page has been permanently deleted",
        }
        mock_client.delete.assert_called_once_with("/pages/456?purge=true")

    async def test_list_block(self, ctx, mock_client):
        mock_client.get.return_value = PaginatedResponseFactory.create(
            [ConfluencePageFactory.create("1")],
            next_link="/wiki/api/v2/pages?cursor=abc",
        )

        result = json.loads(await run_block(ctx, "listPages", ListPagesInput()))

        assert result["nextCursor"] == "abc"
        assert result["pages"][0]["id"] == "1"

    async def test_failure_returns_error_json(self, ctx, mock_client):
        mock_client.delete.side_effect = ConfluenceApiError(404, "Not Found")

        result = json.loads(
            await run_block(ctx, "deletePage", DeletePageInput(page_id="456"))
        )

        assert result == {
            "error": "Failed to delete Confluence page: Confluence API error (404): Not Found"
        }

    async def test_unconfigured_server_raises(self, mock_client):
        ctx = MockFastMCP.create_context(MainAppContext())

        with pytest.raises(ValueError, match="Confluence configuration not available"):
            await run_block(ctx, "deletePage", DeletePageInput(page_id="456"))

        mock_client.delete.assert_not_called()


def test_to_json_keeps_unicode():
    assert to_json({"title": "Überblick"}) == '{\n  "title": "Überblick"\n}'


class TestCheckWriteAccess:
    @staticmethod
    def _tool():
        @check_write_access
        async def create_page(ctx, params):
            return "created"

        return create_page

    async def test_allows_when_writable(self):
        ctx = MockFastMCP.create_context(MainAppContext(read_only=False))

        assert await self._tool()(ctx, {}) == "created"

    async def test_blocks_in_read_only_mode(self):
        ctx = MockFastMCP.create_context(MainAppContext(read_only=True))

        with pytest.raises(ValueError, match="Cannot create page in read-only mode."):
            await self._tool()(ctx, {})

    async def test_keeps_tool_name(self):
        assert self._tool().__name__ == "create_page"


class TestConnectionStatus:
    def test_includes_startup_status(self, confluence_config):
        app_context = MainAppContext(
            full_confluence_config=confluence_config,
            sync_result=SyncResult(new_status="failed"),
        )

        with patch("confluence_blocks.app.create_confluence_client") as mock_create:
            mock_create.return_value.__enter__.return_value.get.return_value = {}
            result = connection_status(confluence_config, app_context)

        assert result["newStatus"] == "ready"
        assert result["startupStatus"] == "failed"
        assert result["signalUpdates"]["userAccountId"] == "test@example.com"

    def test_without_startup_result(self, confluence_config):
        with patch("confluence_blocks.app.create_confluence_client") as mock_create:
            mock_create.return_value.__enter__.return_value.get.return_value = {}
            result = connection_status(confluence_config, MainAppContext())

        assert "startupStatus" not in result


class TestDescribeBlocks:
    def test_lists_every_block_with_schemas(self):
        described = {entry["key"]: entry for entry in describe_blocks()}

        assert len(described) == 10
        create = described["createPage"]
        assert create["write"] is True
        assert set(create["inputSchema"]["required"]) == {"spaceId", "title"}
        assert "pageId" in create["outputSchema"]["properties"]
        assert "nextCursor" in described["listPages"]["outputSchema"]["properties"]

    def test_read_only_leaves_out_write_blocks(self):
        keys = {entry["key"] for entry in describe_blocks(read_only=True)}

        assert keys == {"getPage", "listPages", "getSpaces", "getVersions", "getChildPages"}
