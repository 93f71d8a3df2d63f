"""
Output events for page blocks.
"""

from typing import Any

from ..base import EventModel

Record = dict[str, Any]


def _links(data: Record) -> Record:
    return data.get("_links") or {}


class PageEvent(EventModel):
    """A created or updated page, with ``_links`` flattened to URLs."""

    page_id: str
    title: str | None = None
    status: str | None = None
    space_id: str | None = None
    parent_id: str | None = None
    author_id: str | None = None
    created_at: str | None = None
    version: Any = None
    edit_url: str | None = None
    web_url: str | None = None
    body: Any = None

    @classmethod
    def from_api_response(cls, data: Record) -> "PageEvent":
        links = _links(data)
        return cls(
            page_id=data["id"],
            title=data.get("title"),
            status=data.get("status"),
            space_id=data.get("spaceId"),
            parent_id=data.get("parentId"),
            author_id=data.get("authorId"),
            created_at=data.get("createdAt"),
            version=data.get("version"),
            edit_url=links.get("editui"),
            web_url=links.get("webui"),
            body=data.get("body"),
        )


class PageDetailsEvent(PageEvent):
    """A single page as returned by Get Page, with the optional includes."""

    owner_id: str | None = None
    labels: Any = None
    properties: Any = None
    operations: Any = None
    likes: Any = None
    versions: Any = None
    api_url: str | None = None

    @classmethod
    def from_api_response(cls, data: Record) -> "PageDetailsEvent":
        links = _links(data)
        return cls(
            page_id=data["id"],
            title=data.get("title"),
            status=data.get("status"),
            space_id=data.get("spaceId"),
            parent_id=data.get("parentId"),
            author_id=data.get("authorId"),
            owner_id=data.get("ownerId"),
            created_at=data.get("createdAt"),
            version=data.get("version"),
            body=data.get("body"),
            labels=data.get("labels"),
            properties=data.get("properties"),
            operations=data.get("operations"),
            likes=data.get("likes"),
            versions=data.get("versions"),
            edit_url=links.get("editui"),
            web_url=links.get("webui"),
            api_url=links.get("self"),
        )


class PageDeletedEvent(EventModel):
    page_id: str
    deleted: bool = True
    purged: bool
    message: str
