"""
Output events for comment blocks.
"""

from typing import Any

from ..base import EventModel

Record = dict[str, Any]


class CommentEvent(EventModel):
    comment_id: str
    status: str | None = None
    title: str | None = None
    page_id: str | None = None
    parent_comment_id: str | None = None
    author_id: str | None = None
    created_at: str | None = None
    version: Any = None
    body: Any = None
    inline_comment_properties: Any = None
    web_url: str | None = None
    api_url: str | None = None

    @classmethod
    def from_api_response(cls, data: Record) -> "CommentEvent":
        links = data.get("_links") or {}
        return cls(
            comment_id=data["id"],
            status=data.get("status"),
            title=data.get("title"),
            page_id=data.get("pageId"),
            parent_comment_id=data.get("parentCommentId"),
            author_id=data.get("authorId"),
            created_at=data.get("createdAt"),
            version=data.get("version"),
            body=data.get("body"),
            inline_comment_properties=data.get("inlineCommentProperties"),
            web_url=links.get("webui"),
            api_url=links.get("self"),
        )
