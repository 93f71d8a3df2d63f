"""Tests for model constants.

Focused tests for the defaults and enumerations the block inputs declare.
"""

from typing import get_args

from confluence_blocks.models.constants import (
    AUTH_FAILED_DESCRIPTION,
    DEFAULT_BODY_REPRESENTATION,
    DEFAULT_LIMIT,
    DEFAULT_PAGE_STATUS,
    MAX_LIMIT,
    PAGE_PURGED_MESSAGE,
    PAGE_TRASHED_MESSAGE,
    STATUS_FAILED,
    STATUS_READY,
    CommentBodyRepresentation,
    PageBodyFormat,
    PageBodyRepresentation,
    PageListStatus,
    PageSort,
    PageStatus,
    SpaceSort,
    VersionSort,
)


class TestDefaults:
    """Test suite for default values."""

    def test_query_defaults(self):
        assert DEFAULT_LIMIT == 25
        assert MAX_LIMIT == 250
        assert DEFAULT_LIMIT <= MAX_LIMIT

    def test_body_and_status_defaults(self):
        assert DEFAULT_BODY_REPRESENTATION == "storage"
        assert DEFAULT_PAGE_STATUS == "current"

    def test_defaults_are_valid_enum_members(self):
        """Test that every default belongs to the enumeration it defaults."""
        assert DEFAULT_BODY_REPRESENTATION in get_args(PageBodyRepresentation)
        assert DEFAULT_BODY_REPRESENTATION in get_args(CommentBodyRepresentation)
        assert DEFAULT_BODY_REPRESENTATION in get_args(PageBodyFormat)
        assert DEFAULT_PAGE_STATUS in get_args(PageStatus)


class TestEnumerations:
    """Test suite for the enumerated input values."""

    def test_comment_representation_excludes_wiki(self):
        assert "wiki" in get_args(PageBodyRepresentation)
        assert "wiki" not in get_args(CommentBodyRepresentation)

    def test_list_status_adds_archived(self):
        assert set(get_args(PageListStatus)) == set(get_args(PageStatus)) | {"archived"}

    def test_sort_orders(self):
        assert set(get_args(PageSort)) == {"id", "title", "created-date", "modified-date"}
        assert "key" in get_args(SpaceSort)
        assert set(get_args(VersionSort)) == {"modified-date", "version"}


class TestMessages:
    def test_delete_messages(self):
        assert PAGE_PURGED_MESSAGE == "Page has been permanently deleted"
        assert PAGE_TRASHED_MESSAGE == "Page has been moved to trash"

    def test_status_values(self):
        assert STATUS_READY == "ready"
        assert STATUS_FAILED == "failed"
        assert AUTH_FAILED_DESCRIPTION == "Authentication error, see logs"
