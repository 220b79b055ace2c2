"""Tool registry: registers tool families, validates calls and shapes results."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from pydantic import ValidationError

from shared.errors import DuplicateToolError, HttpStatusError, ToolValidationError
from shared.log import ToolLogger
from shared.responses import error_response
from shared.schemas.tools import (
    ImageBlock,
    ModuleManifest,
    TextBlock,
    ToolDefinition,
    ToolInput,
    ToolResult,
)


def to_mcp_content(result: ToolResult) -> list[types.TextContent | types.ImageContent]:
    """Convert a ``ToolResult`` into MCP content blocks."""
    blocks: list[types.TextContent | types.ImageContent] = []
    for block in result.content:
        if isinstance(block, ImageBlock):
            blocks.append(types.ImageContent(type="image", data=block.data, mimeType=block.mime_type))
        elif isinstance(block, TextBlock):
            blocks.append(types.TextContent(type="text", text=block.text))
    return blocks


class ToolRegistry:
    """Holds every tool of one server instance and routes calls to handlers."""

    def __init__(self, logger: ToolLogger):
        self.logger = logger
        self.manifests: dict[str, ModuleManifest] = {}
        self._tools: dict[str, ToolDefinition] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def register(self, definition: ToolDefinition) -> None:
        """Add a tool.

        Raises:
            DuplicateToolError: If a tool with the same name exists.
        """
        if definition.name in self._tools:
            raise DuplicateToolError(definition.name)
        self._tools[definition.name] = definition

    def register_module(self, manifest: ModuleManifest, handlers: object) -> None:
        """Bind each tool of ``manifest`` to the ``handlers`` method of the same name."""
        for spec in manifest.tools:
            handler = getattr(handlers, spec.name, None)
            if handler is None:
                raise AttributeError(f"{type(handlers).__name__} has no handler for tool {spec.name}")
            self.register(
                ToolDefinition(
                    name=spec.name,
                    description=spec.description,
                    input_model=spec.input_model,
                    handler=handler,
                )
            )
        self.manifests[manifest.module_name] = manifest
        self.logger.debug(
            "registry",
            f"Registered {manifest.module_name}",
            {"tools": manifest.tool_names()},
        )

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_model.model_json_schema(by_alias=True),
            )
            for tool in self._tools.values()
        ]

    def validate(self, name: str, arguments: dict[str, Any] | None) -> ToolInput:
        """Parse raw arguments into the tool's input model.

        Raises:
            ToolValidationError: Unknown tool or rejected arguments.
        """
        tool = self._tools.get(name)
        if tool is None:
            raise ToolValidationError(name, message=f"Unknown tool: {name}")
        try:
            return tool.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolValidationError(name, e.errors(include_url=False)) from e

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Validate, log and execute one tool call.

        Non-2xx responses become ordinary results. Configuration and
        transport errors propagate to the transport as execution failures.
        """
        params = self.validate(name, arguments)
        self.logger.tool_call(name, params.logged_params())

        try:
            return await self._tools[name].handler(params)
        except HttpStatusError as e:
            return error_response(e.status, e.body, e.endpoint, self.logger)

    def mount(self, server: Server) -> Server:
        """Install list/call handlers on a low-level MCP server."""

        @server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return self.list_tools()

        @server.call_tool()
        async def call_tool(
            name: str, arguments: dict[str, Any] | None
        ) -> list[types.TextContent | types.ImageContent]:
            result = await self.call(name, arguments)
            return to_mcp_content(result)

        return server
