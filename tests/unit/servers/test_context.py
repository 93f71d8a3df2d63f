"""Tests for the server context module."""

import pytest

from confluence_blocks.app import SyncResult
from confluence_blocks.confluence.config import ConfluenceConfig
from confluence_blocks.servers.context import MainAppContext


@pytest.fixture
def confluence_config():
    return ConfluenceConfig(
        url="https://example.atlassian.net",
        email="test@example.com",
        api_token="test_token",
    )


class TestMainAppContext:
    """Tests for the MainAppContext dataclass."""

    def test_initialization_with_defaults(self):
        """Test MainAppContext initialization with default values."""
        context = MainAppContext()

        assert context.full_confluence_config is None
        assert context.sync_result is None
        assert context.read_only is False
        assert context.enabled_tools is None

    def test_initialization_with_all_parameters(self, confluence_config):
        """Test MainAppContext initialization with all parameters provided."""
        # Arrange
        sync_result = SyncResult(new_status="ready")
        enabled_tools = ["confluence_get_page", "confluence_list_pages"]

        # Act
        context = MainAppContext(
            full_confluence_config=confluence_config,
            sync_result=sync_result,
            read_only=True,
            enabled_tools=enabled_tools,
        )

        # Assert
        assert context.full_confluence_config is confluence_config
        assert context.sync_result is sync_result
        assert context.read_only is True
        assert context.enabled_tools == enabled_tools

    def test_frozen_dataclass_behavior(self, confluence_config):
        """Test that MainAppContext is frozen and immutable."""
        context = MainAppContext(read_only=False)

        with pytest.raises(AttributeError):
            context.read_only = True

        with pytest.raises(AttributeError):
            context.full_confluence_config = confluence_config

    def test_string_representation_hides_token(self, confluence_config):
        """Test that the API token never shows up in the context repr."""
        context = MainAppContext(
            full_confluence_config=confluence_config,
            read_only=True,
            enabled_tools=["tool1", "tool2"],
        )
        str_repr = str(context)

        assert "MainAppContext" in str_repr
        assert "read_only=True" in str_repr
        assert "enabled_tools=['tool1', 'tool2']" in str_repr
        assert "test@example.com" in str_repr
        assert "test_token" not in str_repr

    def test_equality_comparison(self, confluence_config):
        """Test equality comparison between MainAppContext instances."""
        assert MainAppContext() == MainAppContext()
        assert MainAppContext(read_only=False) != MainAppContext(read_only=True)

        other_config = ConfluenceConfig(
            url="https://different.atlassian.net",
            email="different@example.com",
            api_token="different_token",
        )
        assert MainAppContext(full_confluence_config=confluence_config) != MainAppContext(
            full_confluence_config=other_config
        )

    def test_hash_behavior(self):
        """Test hash behavior for instances with only hashable fields."""
        context1 = MainAppContext(read_only=True)
        context2 = MainAppContext(read_only=True)
        assert hash(context1) == hash(context2)
