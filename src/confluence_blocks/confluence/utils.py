"""Query string and link helpers for Confluence API v2 endpoints."""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse

QueryValue = str | int | bool | Iterable[str] | None


def build_query(params: Iterable[tuple[str, QueryValue]]) -> str:
    """Build a query string from only the parameters that are present.

    Falsy values are skipped. ``True`` is sent as ``true``. Lists and tuples
    are repeated as one entry per element under the same key, in order.

    Example:
        >>> build_query([("limit", 25), ("id", ["1", "2"]), ("title", None)])
        'limit=25&id=1&id=2'
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params:
        if not value:
            continue
        if isinstance(value, bool):
            pairs.append((key, "true"))
        elif isinstance(value, (list, tuple)):
            pairs.extend((key, str(item)) for item in value)
        else:
            pairs.append((key, str(value)))
    return urlencode(pairs)


def with_query(path: str, params: Iterable[tuple[str, QueryValue]]) -> str:
    """Append the query built from ``params`` to ``path`` when non-empty."""
    query = build_query(params)
    return f"{path}?{query}" if query else path


def extract_cursor(next_link: str | None) -> str | None:
    """Return the ``cursor`` query parameter of a ``next`` link, if any.

    Works for absolute URLs and for the relative links Confluence returns.
    """
    if not next_link:
        return None
    values = parse_qs(urlparse(next_link).query).get("cursor")
    return values[0] if values else None


def pagination_fields(response: Mapping[str, Any]) -> dict[str, Any]:
    """Derive ``hasMore`` and ``nextCursor`` from a paginated envelope."""
    next_link = (response.get("_links") or {}).get("next")
    return {
        "has_more": bool(next_link),
        "next_cursor": extract_cursor(next_link),
    }
