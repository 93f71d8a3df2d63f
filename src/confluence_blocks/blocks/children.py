"""Children blocks - direct child pages."""

from ..confluence import ConfluenceClient
from ..confluence.utils import with_query
from ..models.confluence import ChildPageListEvent
from ..models.inputs import GetChildPagesInput
from .base import block


@block(
    "getChildPages",
    name="Get Child Pages",
    description="Retrieve the direct child pages of a Confluence page",
    category="Children",
    input_model=GetChildPagesInput,
    output_model=ChildPageListEvent,
    error_prefix="Failed to retrieve child pages",
)
def get_child_pages(
    client: ConfluenceClient, params: GetChildPagesInput
) -> ChildPageListEvent:
    endpoint = with_query(
        f"/pages/{params.page_id}/direct-children",
        [
            ("limit", params.limit),
            ("cursor", params.cursor),
            ("sort", params.sort),
            ("descending", params.descending),
            ("body-format", params.body_format),
        ],
    )

    response = client.get(endpoint)
    return ChildPageListEvent.from_api_response(response, parent_page_id=params.page_id)
