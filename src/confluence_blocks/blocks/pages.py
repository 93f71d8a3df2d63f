"""Page blocks - create, update, get, delete and list pages."""

import logging

from ..confluence import ConfluenceClient
from ..confluence.utils import with_query
from ..models.confluence import (
    ContentBody,
    CreatePagePayload,
    PageDeletedEvent,
    PageDetailsEvent,
    PageEvent,
    PageListEvent,
    UpdatePagePayload,
    VersionUpdate,
)
from ..models.constants import PAGE_PURGED_MESSAGE, PAGE_TRASHED_MESSAGE
from ..models.inputs import (
    CreatePageInput,
    DeletePageInput,
    GetPageInput,
    ListPagesInput,
    UpdatePageInput,
)
from .base import block

logger = logging.getLogger(__name__)


@block(
    "createPage",
    name="Create Page",
    description="Create a new Confluence page with specified details",
    category="Pages",
    input_model=CreatePageInput,
    output_model=PageEvent,
    error_prefix="Failed to create Confluence page",
    write=True,
)
def create_page(client: ConfluenceClient, params: CreatePageInput) -> PageEvent:
    payload = CreatePagePayload(
        space_id=params.space_id,
        status=params.status,
        title=params.title,
        parent_id=params.parent_id or None,
        body=(
            ContentBody(representation=params.body_representation, value=params.body_value)
            if params.body_value
            else None
        ),
    )

    logger.debug(f"Creating page '{params.title}' in space {params.space_id}")
    created_page = client.post("/pages", payload.to_payload())
    return PageEvent.from_api_response(created_page)


@block(
    "updatePage",
    name="Update Page",
    description="Update an existing Confluence page",
    category="Pages",
    input_model=UpdatePageInput,
    output_model=PageEvent,
    error_prefix="Failed to update Confluence page",
    write=True,
)
def update_page(client: ConfluenceClient, params: UpdatePageInput) -> PageEvent:
    """Update a page; Confluence increments the version number server-side."""
    payload = UpdatePagePayload(
        version=VersionUpdate(
            number=params.version_number,
            minor_edit=params.minor_edit,
            message=params.version_message or None,
        ),
        title=params.title or None,
        status=params.status or None,
        body=(
            ContentBody(representation=params.body_representation, value=params.body_value)
            if params.body_value
            else None
        ),
    )

    updated_page = client.put(f"/pages/{params.page_id}", payload.to_payload())
    return PageEvent.from_api_response(updated_page)


@block(
    "getPage",
    name="Get Page",
    description="Retrieve a specific Confluence page by ID",
    category="Pages",
    input_model=GetPageInput,
    output_model=PageDetailsEvent,
    error_prefix="Failed to retrieve Confluence page",
)
def get_page(client: ConfluenceClient, params: GetPageInput) -> PageDetailsEvent:
    endpoint = with_query(
        f"/pages/{params.page_id}",
        [
            ("body-format", params.body_format),
            ("get-draft", params.get_draft),
            ("version", params.version),
            ("include-labels", params.include_labels),
            ("include-properties", params.include_properties),
            ("include-operations", params.include_operations),
            ("include-likes", params.include_likes),
            ("include-versions", params.include_versions),
        ],
    )

    page = client.get(endpoint)
    return PageDetailsEvent.from_api_response(page)


@block(
    "deletePage",
    name="Delete Page",
    description="Delete a Confluence page (move to trash or permanently delete)",
    category="Pages",
    input_model=DeletePageInput,
    output_model=PageDeletedEvent,
    error_prefix="Failed to delete Confluence page",
    write=True,
)
def delete_page(client: ConfluenceClient, params: DeletePageInput) -> PageDeletedEvent:
    # DELETE returns 204 No Content; nothing to reshape
    client.delete(with_query(f"/pages/{params.page_id}", [("purge", params.purge)]))

    return PageDeletedEvent(
        page_id=params.page_id,
        deleted=True,
        purged=params.purge,
        message=PAGE_PURGED_MESSAGE if params.purge else PAGE_TRASHED_MESSAGE,
    )


@block(
    "listPages",
    name="List Pages",
    description="Retrieve a list of pages from Confluence with filtering and pagination",
    category="Pages",
    input_model=ListPagesInput,
    output_model=PageListEvent,
    error_prefix="Failed to retrieve Confluence pages",
)
def list_pages(client: ConfluenceClient, params: ListPagesInput) -> PageListEvent:
    date_range = params.created_at_range
    endpoint = with_query(
        "/pages",
        [
            ("limit", params.limit),
            ("cursor", params.cursor),
            ("id", params.ids),
            ("space-id", params.space_ids),
            ("title", params.title),
            ("status", params.status),
            ("author-id", params.author_id),
            ("owner-id", params.owner_id),
            ("created-at", params.created_at),
            ("created-at-from", date_range.from_ if date_range else None),
            ("created-at-to", date_range.to if date_range else None),
            ("sort", params.sort),
            ("descending", params.descending),
            ("body-format", params.body_format),
        ],
    )

    response = client.get(endpoint)
    return PageListEvent.from_api_response(response)
