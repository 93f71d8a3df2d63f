"""Space blocks - list spaces."""

from ..confluence import ConfluenceClient
from ..confluence.utils import with_query
from ..models.confluence import SpaceListEvent
from ..models.inputs import GetSpacesInput
from .base import block


@block(
    "getSpaces",
    name="Get Spaces",
    description="Retrieve a list of Confluence spaces with filtering and pagination",
    category="Spaces",
    input_model=GetSpacesInput,
    output_model=SpaceListEvent,
    error_prefix="Failed to retrieve Confluence spaces",
)
def get_spaces(client: ConfluenceClient, params: GetSpacesInput) -> SpaceListEvent:
    endpoint = with_query(
        "/spaces",
        [
            ("limit", params.limit),
            ("cursor", params.cursor),
            ("id", params.ids),
            ("key", params.keys),
            ("type", params.type),
            ("status", params.status),
            ("label", params.labels),
            ("favourited-by", params.favourited_by),
            ("sort", params.sort),
            ("descending", params.descending),
        ],
    )

    response = client.get(endpoint)
    return SpaceListEvent.from_api_response(response)
