"""Confluence request payloads and output events."""

from .comment import CommentEvent
from .page import PageDeletedEvent, PageDetailsEvent, PageEvent
from .payloads import (
    CommentPayload,
    ContentBody,
    CreatePagePayload,
    InlineCommentPosition,
    UpdatePagePayload,
    VersionUpdate,
)
from .results import (
    ChildPageListEvent,
    PageListEvent,
    PaginatedEvent,
    SpaceListEvent,
    VersionListEvent,
)

__all__ = [
    "ChildPageListEvent",
    "CommentEvent",
    "CommentPayload",
    "ContentBody",
    "CreatePagePayload",
    "InlineCommentPosition",
    "PageDeletedEvent",
    "PageDetailsEvent",
    "PageEvent",
    "PageListEvent",
    "PaginatedEvent",
    "SpaceListEvent",
    "UpdatePagePayload",
    "VersionListEvent",
    "VersionUpdate",
]
