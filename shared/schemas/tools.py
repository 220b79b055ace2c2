"""Tool, manifest and result schemas."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ToolInput(BaseModel):
    """Base class for tool argument models.

    Fields are snake_case in Python and camelCase on the wire
    (``max_output_tokens`` <-> ``maxOutputTokens``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def logged_params(self) -> dict[str, Any]:
        """Arguments as the caller sent them, minus unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TextBlock(BaseModel):
    """A text content block."""

    type: Literal["text"] = "text"
    text: str


class ImageBlock(BaseModel):
    """A base64 image content block."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str = "image/png"


ContentBlock = Annotated[Union[TextBlock, ImageBlock], Field(discriminator="type")]


class ToolResult(BaseModel):
    """Result envelope returned by every tool handler."""

    model_config = ConfigDict(frozen=True)

    content: list[ContentBlock]

    @property
    def text(self) -> str:
        """All text blocks joined by newlines (handy in logs and tests)."""
        return "\n".join(block.text for block in self.content if isinstance(block, TextBlock))


ToolHandler = Callable[[Any], Awaitable[ToolResult]]


class ToolSpec(BaseModel):
    """Declarative part of a tool: name, description, input schema."""

    model_config = ConfigDict(frozen=True)

    name: str  # e.g. "datastore_get_entry"
    description: str
    input_model: type[ToolInput]


class ToolDefinition(ToolSpec):
    """A tool bound to the coroutine that executes it."""

    handler: ToolHandler


class ModuleManifest(BaseModel):
    """Manifest describing a tool family."""

    module_name: str
    description: str
    tools: list[ToolSpec]

    def tool_names(self) -> list[str]:
        return [tool.name for tool in self.tools]
