"""
Input models for every block.

Each model declares the block's input fields with their host-facing
camelCase names, defaults and enumerations. Validation and defaulting
happen when the host config is parsed, before any handler runs.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, model_validator

from .base import ApiModel
from .constants import (
    DEFAULT_BODY_REPRESENTATION,
    DEFAULT_LIMIT,
    DEFAULT_PAGE_STATUS,
    MAX_LIMIT,
    CommentBodyRepresentation,
    ListBodyFormat,
    PageBodyFormat,
    PageBodyRepresentation,
    PageListStatus,
    PageSort,
    PageStatus,
    SpaceSort,
    SpaceStatus,
    SpaceType,
    VersionSort,
)


class BlockInput(ApiModel):
    """Base for block inputs.

    An explicit ``null`` is treated like an omitted key, so optional fields
    fall back to their defaults whichever way the host leaves them unset.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


class PaginatedInput(BlockInput):
    """Fields shared by every list block."""

    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=MAX_LIMIT,
        description="Maximum number of results to return (default: 25, max: 250)",
    )
    cursor: str | None = Field(
        default=None,
        description="Used for pagination. Use the cursor from the previous response to get the next page",
    )
    descending: bool = Field(default=False, description="Sort in descending order")


class CreatePageInput(BlockInput):
    space_id: str = Field(description="The ID of the space where the page will be created")
    title: str = Field(description="The title of the page")
    status: PageStatus = Field(
        default=DEFAULT_PAGE_STATUS,
        description="The status of the page (current or draft)",
    )
    parent_id: str | None = Field(
        default=None,
        description="The ID of the parent page (optional, creates a child page)",
    )
    body_value: str | None = Field(default=None, description="The content value of the page")
    body_representation: PageBodyRepresentation = Field(
        default=DEFAULT_BODY_REPRESENTATION,
        description="The representation format (storage, atlas_doc_format, wiki)",
    )


class UpdatePageInput(BlockInput):
    page_id: str = Field(description="The ID of the page to update")
    title: str | None = Field(default=None, description="The new title of the page")
    status: PageStatus | None = Field(
        default=None, description="The status of the page (current or draft)"
    )
    body_value: str | None = Field(
        default=None, description="The new content value of the page"
    )
    body_representation: PageBodyRepresentation = Field(
        default=DEFAULT_BODY_REPRESENTATION,
        description="The representation format (storage, atlas_doc_format, wiki)",
    )
    version_number: int = Field(
        description="The current version number of the page (required for updates)"
    )
    version_message: str | None = Field(
        default=None, description="Optional message describing the changes made"
    )
    minor_edit: bool = Field(
        default=False,
        description="Whether this is a minor edit (doesn't notify watchers)",
    )


class GetPageInput(BlockInput):
    page_id: str = Field(description="The ID of the page to retrieve")
    body_format: PageBodyFormat = Field(
        default=DEFAULT_BODY_REPRESENTATION,
        description="The format to return the page body content in",
    )
    get_draft: bool = Field(
        default=False, description="Whether to retrieve the draft version if available"
    )
    version: int | None = Field(
        default=None, description="Specific version number to retrieve (optional)"
    )
    include_labels: bool = Field(
        default=False, description="Whether to include page labels in the response"
    )
    include_properties: bool = Field(
        default=False, description="Whether to include page properties in the response"
    )
    include_operations: bool = Field(
        default=False,
        description="Whether to include available operations in the response",
    )
    include_likes: bool = Field(
        default=False, description="Whether to include like information in the response"
    )
    include_versions: bool = Field(
        default=False, description="Whether to include version history in the response"
    )


class DeletePageInput(BlockInput):
    page_id: str = Field(description="The ID of the page to delete")
    purge: bool = Field(
        default=False,
        description="Whether to permanently delete the page (true) or move to trash (false)",
    )


class DateRange(BlockInput):
    from_: str | None = Field(
        default=None, alias="from", description="Start date (ISO 8601 format)"
    )
    to: str | None = Field(default=None, description="End date (ISO 8601 format)")


class ListPagesInput(PaginatedInput):
    ids: list[str] | None = Field(default=None, description="Filter pages by specific IDs")
    space_ids: list[str] | None = Field(
        default=None, description="Filter pages by specific space IDs"
    )
    title: str | None = Field(default=None, description="Filter pages by title (partial match)")
    status: PageListStatus | None = Field(default=None, description="Filter pages by status")
    author_id: str | None = Field(
        default=None, description="Filter pages by author account ID"
    )
    owner_id: str | None = Field(default=None, description="Filter pages by owner account ID")
    created_at: str | None = Field(
        default=None, description="Filter pages by creation date (ISO 8601 format)"
    )
    created_at_range: DateRange | None = Field(
        default=None, description="Filter pages created within a date range"
    )
    sort: PageSort | None = Field(default=None, description="Sort the results by field")
    body_format: ListBodyFormat | None = Field(
        default=None, description="Include page body in specified format"
    )


class GetSpacesInput(PaginatedInput):
    ids: list[str] | None = Field(default=None, description="Filter spaces by specific IDs")
    keys: list[str] | None = Field(default=None, description="Filter spaces by specific keys")
    type: SpaceType | None = Field(default=None, description="Filter spaces by type")
    status: SpaceStatus | None = Field(default=None, description="Filter spaces by status")
    labels: list[str] | None = Field(default=None, description="Filter spaces by labels")
    favourited_by: str | None = Field(
        default=None,
        description="Filter spaces favorited by a specific user (account ID)",
    )
    sort: SpaceSort | None = Field(default=None, description="Sort the results")


class CreateFooterCommentInput(BlockInput):
    page_id: str = Field(description="The ID of the page to comment on")
    body_value: str = Field(description="The content of the comment")
    body_representation: CommentBodyRepresentation = Field(
        default=DEFAULT_BODY_REPRESENTATION,
        description="The representation format of the comment content",
    )
    parent_comment_id: str | None = Field(
        default=None, description="The ID of the parent comment (for replies)"
    )


class InlineCommentProperties(BlockInput):
    text_selection: str = Field(
        description="The selected text that the comment is attached to"
    )
    text_selection_match_index: int | None = Field(
        default=None,
        description="The index of the text selection match (if multiple matches exist)",
    )


class CreateInlineCommentInput(CreateFooterCommentInput):
    inline_comment_properties: InlineCommentProperties = Field(
        description="Properties defining where the inline comment is positioned"
    )
    parent_comment_id: str | None = Field(
        default=None,
        description="The ID of the parent comment (for replies to inline comments)",
    )


class GetVersionsInput(PaginatedInput):
    page_id: str = Field(description="The ID of the page to get versions for")
    sort: VersionSort | None = Field(default=None, description="Sort the results by field")
    body_format: ListBodyFormat | None = Field(
        default=None, description="Include version body content in specified format"
    )


class GetChildPagesInput(PaginatedInput):
    page_id: str = Field(description="The ID of the parent page to get children for")
    sort: PageSort | None = Field(default=None, description="Sort the results by field")
    body_format: ListBodyFormat | None = Field(
        default=None, description="Include page body content in specified format"
    )
