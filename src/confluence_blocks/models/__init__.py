"""
Pydantic models for block inputs, request payloads and output events.
"""

from .base import ApiModel, EventModel, PayloadModel
from .confluence import (
    ChildPageListEvent,
    CommentEvent,
    PageDeletedEvent,
    PageDetailsEvent,
    PageEvent,
    PageListEvent,
    SpaceListEvent,
    VersionListEvent,
)
from .inputs import (
    CreateFooterCommentInput,
    CreateInlineCommentInput,
    CreatePageInput,
    DeletePageInput,
    GetChildPagesInput,
    GetPageInput,
    GetSpacesInput,
    GetVersionsInput,
    ListPagesInput,
    UpdatePageInput,
)

__all__ = [
    # Base models
    "ApiModel",
    "EventModel",
    "PayloadModel",
    # Inputs
    "CreateFooterCommentInput",
    "CreateInlineCommentInput",
    "CreatePageInput",
    "DeletePageInput",
    "GetChildPagesInput",
    "GetPageInput",
    "GetSpacesInput",
    "GetVersionsInput",
    "ListPagesInput",
    "UpdatePageInput",
    # Events
    "ChildPageListEvent",
    "CommentEvent",
    "PageDeletedEvent",
    "PageDetailsEvent",
    "PageEvent",
    "PageListEvent",
    "SpaceListEvent",
    "VersionListEvent",
]
