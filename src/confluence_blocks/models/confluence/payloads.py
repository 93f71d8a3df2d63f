"""
Request bodies for the write endpoints.

Each payload lists the fields the endpoint accepts; optional fields left as
None are not sent.
"""

from ..base import PayloadModel


class ContentBody(PayloadModel):
    representation: str
    value: str


class VersionUpdate(PayloadModel):
    number: int
    minor_edit: bool = False
    message: str | None = None


class CreatePagePayload(PayloadModel):
    space_id: str
    status: str
    title: str
    parent_id: str | None = None
    body: ContentBody | None = None


class UpdatePagePayload(PayloadModel):
    version: VersionUpdate
    title: str | None = None
    status: str | None = None
    body: ContentBody | None = None


class InlineCommentPosition(PayloadModel):
    text_selection: str
    text_selection_match_index: int | None = None


class CommentPayload(PayloadModel):
    page_id: str
    body: ContentBody
    inline_comment_properties: InlineCommentPosition | None = None
    parent_comment_id: str | None = None
