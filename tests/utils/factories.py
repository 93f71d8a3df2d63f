"""Test data factories for creating consistent test objects."""

from typing import Any

BASE_URL = "https://test.atlassian.net"


class ConfluencePageFactory:
    """Factory for Confluence API v2 page payloads."""

    @staticmethod
    def create(page_id: str = "123456", **overrides) -> dict[str, Any]:
        defaults = {
            "id": page_id,
            "status": "current",
            "title": "Test Page",
            "spaceId": "98765",
            "parentId": "111111",
            "authorId": "author-1",
            "ownerId": "owner-1",
            "createdAt": "2024-01-01T10:00:00.000Z",
            "version": {
                "createdAt": "2024-01-02T10:00:00.000Z",
                "message": "",
                "number": 1,
                "minorEdit": False,
                "authorId": "author-1",
            },
            "body": {"representation": "storage", "value": "<p>Test content</p>"},
            "_links": {
                "editui": f"/pages/resumedraft.action?draftId={page_id}",
                "webui": f"/spaces/TEST/pages/{page_id}/Test+Page",
                "self": f"{BASE_URL}/wiki/api/v2/pages/{page_id}",
            },
        }
        return deep_merge(defaults, overrides)


class ConfluenceSpaceFactory:
    """Factory for Confluence API v2 space payloads."""

    @staticmethod
    def create(space_id: str = "98765", key: str = "TEST", **overrides) -> dict[str, Any]:
        defaults = {
            "id": space_id,
            "key": key,
            "name": "Test Space",
            "type": "global",
            "status": "current",
            "authorId": "author-1",
            "createdAt": "2024-01-01T10:00:00.000Z",
            "homepageId": "111111",
            "_links": {"webui": f"/spaces/{key}"},
        }
        return deep_merge(defaults, overrides)


class ConfluenceCommentFactory:
    """Factory for footer and inline comment payloads."""

    @staticmethod
    def create(comment_id: str = "777", page_id: str = "123456", **overrides) -> dict[str, Any]:
        defaults = {
            "id": comment_id,
            "status": "current",
            "title": "Re: Test Page",
            "pageId": page_id,
            "authorId": "author-1",
            "createdAt": "2024-01-03T10:00:00.000Z",
            "version": {
                "createdAt": "2024-01-03T10:00:00.000Z",
                "message": "",
                "number": 1,
                "minorEdit": False,
                "authorId": "author-1",
            },
            "body": {"representation": "storage", "value": "<p>Nice page</p>"},
            "_links": {
                "webui": f"/spaces/TEST/pages/{page_id}?focusedCommentId={comment_id}",
                "self": f"{BASE_URL}/wiki/api/v2/footer-comments/{comment_id}",
            },
        }
        return deep_merge(defaults, overrides)


class ConfluenceVersionFactory:
    """Factory for page version payloads."""

    @staticmethod
    def create(number: int = 1, **overrides) -> dict[str, Any]:
        defaults = {
            "createdAt": "2024-01-02T10:00:00.000Z",
            "message": f"Version {number}",
            "number": number,
            "minorEdit": False,
            "authorId": "author-1",
            "_links": {"self": f"{BASE_URL}/wiki/api/v2/pages/123456/versions/{number}"},
        }
        return deep_merge(defaults, overrides)


class PaginatedResponseFactory:
    """Factory for the ``{results, _links}`` envelope of list endpoints."""

    @staticmethod
    def create(
        results: list[dict[str, Any]], next_link: str | None = None
    ) -> dict[str, Any]:
        links: dict[str, Any] = {"base": f"{BASE_URL}/wiki"}
        if next_link:
            links["next"] = next_link
        return {"results": results, "_links": links}


class AuthConfigFactory:
    """Factory for authentication configuration objects."""

    @staticmethod
    def create_basic_auth_config(**overrides) -> dict[str, str]:
        defaults = {
            "url": BASE_URL,
            "username": "test@example.com",
            "api_token": "test-api-token",
        }
        return {**defaults, **overrides}

    @staticmethod
    def create_app_config(**overrides) -> dict[str, str]:
        """Create the host's app-level config mapping."""
        defaults = {
            "confluenceUrl": BASE_URL,
            "email": "test@example.com",
            "apiToken": "test-api-token",
        }
        return {**defaults, **overrides}


class ErrorResponseFactory:
    """Factory for creating error response test data."""

    @staticmethod
    def create_api_error(
        status_code: int = 400, message: str = "Bad Request"
    ) -> dict[str, Any]:
        return {
            "errors": [{"status": status_code, "code": "INVALID_REQUEST_PARAMETER", "title": message}]
        }


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
