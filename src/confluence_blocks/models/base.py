"""
Base models shared by block inputs, request payloads and output events.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model with camelCase aliases.

    Inputs are validated by alias (``spaceId``) or by field name
    (``space_id``); outputs are always dumped by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PayloadModel(ApiModel):
    """A request body that serializes only the fields that were provided."""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class EventModel(ApiModel):
    """An output event emitted to the host.

    Top-level fields that are None are left out of the event. Nested
    sub-records from the API response are passed through untouched.
    """

    def to_event(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True)
        return {key: value for key, value in data.items() if value is not None}
