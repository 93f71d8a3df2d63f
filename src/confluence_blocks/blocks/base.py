"""Block definition and registry.

A block is one host-invocable Confluence operation: an input model, a
handler that performs exactly one API request, and an output event model.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..confluence import ConfluenceClient, ConfluenceConfig, create_confluence_client
from ..exceptions import BlockExecutionError, BlockInputError
from ..models.base import ApiModel, EventModel
from ..utils.logging import mask_sensitive

logger = logging.getLogger("confluence-blocks.blocks")

Handler = Callable[[ConfluenceClient, Any], EventModel]
Emit = Callable[[dict[str, Any]], Any]

# Block key -> Block, in registration order
BLOCKS: dict[str, "Block"] = {}


@dataclass(frozen=True)
class Block:
    key: str
    name: str
    description: str
    category: str
    input_model: type[ApiModel]
    output_model: type[EventModel]
    error_prefix: str
    handler: Handler = field(repr=False)
    write: bool = False

    @property
    def tags(self) -> set[str]:
        return {"confluence", "write" if self.write else "read"}

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def output_schema(self) -> dict[str, Any]:
        return self.output_model.model_json_schema(by_alias=True)

    def describe(self) -> dict[str, Any]:
        """Host-facing summary of the block with its JSON schemas."""
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "write": self.write,
            "inputSchema": self.input_schema(),
            "outputSchema": self.output_schema(),
        }

    def parse_input(self, input_config: Mapping[str, Any] | ApiModel | None) -> ApiModel:
        """Validate the input config and apply the declared defaults.

        Raises:
            BlockInputError: If a required field is missing or a value is invalid
        """
        if isinstance(input_config, self.input_model):
            return input_config
        try:
            return self.input_model.model_validate(input_config or {})
        except ValidationError as e:
            raise BlockInputError(self.name, str(e)) from e

    def on_event(
        self,
        app_config: Mapping[str, Any] | ConfluenceConfig,
        input_config: Mapping[str, Any] | ApiModel | None,
        emit: Emit | None = None,
    ) -> dict[str, Any]:
        """Run the block once and emit its output event.

        Args:
            app_config: App-level credentials, as a host mapping or a ConfluenceConfig
            input_config: Per-invocation parameters
            emit: Optional host callback receiving the output event

        Returns:
            The output event

        Raises:
            BlockInputError: If the input config is invalid
            BlockExecutionError: If the request or the response handling fails
        """
        params = self.parse_input(input_config)
        config = (
            app_config
            if isinstance(app_config, ConfluenceConfig)
            else ConfluenceConfig.from_app_config(app_config)
        )

        client = create_confluence_client(config)
        try:
            output = self.handler(client, params)
        except Exception as e:
            error = BlockExecutionError(self.error_prefix, e)
            logger.error(mask_sensitive(str(error), [config.api_token]))
            raise error from e
        finally:
            client.close()

        event = output.to_event()
        if emit is not None:
            emit(event)
        return event


def block(
    key: str,
    *,
    name: str,
    description: str,
    category: str,
    input_model: type[ApiModel],
    output_model: type[EventModel],
    error_prefix: str,
    write: bool = False,
) -> Callable[[Handler], Block]:
    """Register a handler as a block under ``key``."""

    def decorator(handler: Handler) -> Block:
        registered = Block(
            key=key,
            name=name,
            description=description,
            category=category,
            input_model=input_model,
            output_model=output_model,
            error_prefix=error_prefix,
            handler=handler,
            write=write,
        )
        BLOCKS[key] = registered
        return registered

    return decorator
