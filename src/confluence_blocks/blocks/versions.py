"""Version blocks - page version history."""

from ..confluence import ConfluenceClient
from ..confluence.utils import with_query
from ..models.confluence import VersionListEvent
from ..models.inputs import GetVersionsInput
from .base import block


@block(
    "getVersions",
    name="Get Page Versions",
    description="Retrieve the version history of a Confluence page",
    category="Versions",
    input_model=GetVersionsInput,
    output_model=VersionListEvent,
    error_prefix="Failed to retrieve page versions",
)
def get_versions(client: ConfluenceClient, params: GetVersionsInput) -> VersionListEvent:
    endpoint = with_query(
        f"/pages/{params.page_id}/versions",
        [
            ("limit", params.limit),
            ("cursor", params.cursor),
            ("sort", params.sort),
            ("descending", params.descending),
            ("body-format", params.body_format),
        ],
    )

    response = client.get(endpoint)
    return VersionListEvent.from_api_response(response, page_id=params.page_id)
