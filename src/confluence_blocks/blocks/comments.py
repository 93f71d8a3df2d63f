"""Comment blocks - footer and inline comments."""

from ..confluence import ConfluenceClient
from ..models.confluence import (
    CommentEvent,
    CommentPayload,
    ContentBody,
    InlineCommentPosition,
)
from ..models.inputs import CreateFooterCommentInput, CreateInlineCommentInput
from .base import block


@block(
    "createFooterComment",
    name="Create Footer Comment",
    description="Create a footer comment on a Confluence page",
    category="Comments",
    input_model=CreateFooterCommentInput,
    output_model=CommentEvent,
    error_prefix="Failed to create footer comment",
    write=True,
)
def create_footer_comment(
    client: ConfluenceClient, params: CreateFooterCommentInput
) -> CommentEvent:
    payload = CommentPayload(
        page_id=params.page_id,
        body=ContentBody(representation=params.body_representation, value=params.body_value),
        parent_comment_id=params.parent_comment_id or None,
    )

    created_comment = client.post("/footer-comments", payload.to_payload())
    return CommentEvent.from_api_response(created_comment)


@block(
    "createInlineComment",
    name="Create Inline Comment",
    description="Create an inline comment attached to selected text on a Confluence page",
    category="Comments",
    input_model=CreateInlineCommentInput,
    output_model=CommentEvent,
    error_prefix="Failed to create inline comment",
    write=True,
)
def create_inline_comment(
    client: ConfluenceClient, params: CreateInlineCommentInput
) -> CommentEvent:
    """Create an inline comment.

    The match index is sent whenever it was given, including 0, so the
    comment lands on the right occurrence of a repeated selection.
    """
    position = params.inline_comment_properties
    payload = CommentPayload(
        page_id=params.page_id,
        body=ContentBody(representation=params.body_representation, value=params.body_value),
        inline_comment_properties=InlineCommentPosition(
            text_selection=position.text_selection,
            text_selection_match_index=position.text_selection_match_index,
        ),
        parent_comment_id=params.parent_comment_id or None,
    )

    created_comment = client.post("/inline-comments", payload.to_payload())
    return CommentEvent.from_api_response(created_comment)
