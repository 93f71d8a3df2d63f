"""
Output events for the paginated list blocks.

Result items are passed through exactly as the API returns them. The
envelope's ``next`` link becomes ``hasMore`` and ``nextCursor``.
"""

from typing import Any

from ...confluence.utils import pagination_fields
from ..base import EventModel

Record = dict[str, Any]


class PaginatedEvent(EventModel):
    total_count: int
    next_cursor: str | None = None
    has_more: bool

    @staticmethod
    def _envelope(response: Record) -> dict[str, Any]:
        results = response.get("results") or []
        return {"results": results, "total_count": len(results), **pagination_fields(response)}


class PageListEvent(PaginatedEvent):
    pages: list[Any]

    @classmethod
    def from_api_response(cls, response: Record) -> "PageListEvent":
        envelope = cls._envelope(response)
        return cls(pages=envelope.pop("results"), **envelope)


class SpaceListEvent(PaginatedEvent):
    spaces: list[Any]

    @classmethod
    def from_api_response(cls, response: Record) -> "SpaceListEvent":
        envelope = cls._envelope(response)
        return cls(spaces=envelope.pop("results"), **envelope)


class VersionListEvent(PaginatedEvent):
    page_id: str
    versions: list[Any]

    @classmethod
    def from_api_response(cls, response: Record, page_id: str) -> "VersionListEvent":
        envelope = cls._envelope(response)
        return cls(page_id=page_id, versions=envelope.pop("results"), **envelope)


class ChildPageListEvent(PaginatedEvent):
    parent_page_id: str
    child_pages: list[Any]

    @classmethod
    def from_api_response(
        cls, response: Record, parent_page_id: str
    ) -> "ChildPageListEvent":
        envelope = cls._envelope(response)
        return cls(
            parent_page_id=parent_page_id,
            child_pages=envelope.pop("results"),
            **envelope,
        )
