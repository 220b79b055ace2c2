"""Tests for ToolRegistry: registration, listing, validation and dispatch."""

from __future__ import annotations

import json

import mcp.types as types
import pytest
from mcp.server.lowlevel import Server
from pydantic import Field

from core.registry import ToolRegistry, to_mcp_content
from core.server import build_registry
from modules.messaging.tools import register_messaging_tools
from modules.text_generation.tools import register_text_generation_tools
from shared.errors import ConfigurationError, DuplicateToolError, HttpStatusError, ToolValidationError
from shared.schemas.tools import (
    ImageBlock,
    ModuleManifest,
    TextBlock,
    ToolDefinition,
    ToolInput,
    ToolResult,
    ToolSpec,
)


class EchoInput(ToolInput):
    text: str = Field(description="Text to echo")
    repeat_count: int = Field(1, ge=1, le=3)


async def _echo(params: EchoInput) -> ToolResult:
    return ToolResult(content=[TextBlock(text=params.text * params.repeat_count)])


def _definition(name: str = "echo", handler=_echo) -> ToolDefinition:
    return ToolDefinition(name=name, description="Echo text", input_model=EchoInput, handler=handler)


def test_duplicate_registration_raises(logger):
    registry = ToolRegistry(logger)
    registry.register(_definition())

    with pytest.raises(DuplicateToolError, match="echo"):
        registry.register(_definition())
    assert len(registry) == 1


def test_register_module_requires_handlers(logger):
    manifest = ModuleManifest(
        module_name="broken",
        description="",
        tools=[ToolSpec(name="missing_tool", description="", input_model=EchoInput)],
    )
    with pytest.raises(AttributeError, match="missing_tool"):
        ToolRegistry(logger).register_module(manifest, object())


def test_full_catalog_has_unique_names(services):
    registry = build_registry(services)

    names = [tool.name for tool in registry.list_tools()]
    assert len(names) == len(set(names))
    assert {
        "generate_text",
        "generate_image",
        "analyze_image",
        "generate_and_upload_decal",
        "generate_and_save_local",
        "datastore_list_stores",
        "datastore_set_entry",
        "messaging_publish",
        "asset_upload",
        "instance_list_children",
        "inventory_check_ownership",
        "thumbnail_get_assets",
        "get_package_file",
    } <= set(names)
    assert len(names) == 26


def test_list_tools_uses_camel_case_schema(logger):
    registry = ToolRegistry(logger)
    registry.register(_definition())

    (tool,) = registry.list_tools()
    assert isinstance(tool, types.Tool)
    assert set(tool.inputSchema["properties"]) == {"text", "repeatCount"}
    assert tool.inputSchema["required"] == ["text"]


def test_validate_rejects_unknown_tool(logger):
    with pytest.raises(ToolValidationError, match="Unknown tool"):
        ToolRegistry(logger).validate("nope", {})


@pytest.mark.parametrize(
    "arguments",
    [
        {},
        {"text": "a", "repeatCount": 9},
        {"text": "a", "unexpected": True},
    ],
)
def test_validate_rejects_bad_arguments(logger, arguments):
    registry = ToolRegistry(logger)
    registry.register(_definition())

    with pytest.raises(ToolValidationError) as exc_info:
        registry.validate("echo", arguments)
    assert exc_info.value.errors


@pytest.mark.asyncio
async def test_call_dispatches_and_logs(logger, log_stream):
    registry = ToolRegistry(logger)
    registry.register(_definition())

    result = await registry.call("echo", {"text": "ab", "repeatCount": 2})

    assert result.text == "abab"
    assert '[INFO] [tool] echo called {"text":"ab","repeatCount":2}' in log_stream.getvalue()


@pytest.mark.asyncio
async def test_http_status_error_becomes_result(logger):
    async def failing(params):
        raise HttpStatusError(404, "not found", "https://apis.roblox.com/x")

    registry = ToolRegistry(logger)
    registry.register(_definition(handler=failing))

    result = await registry.call("echo", {"text": "a"})
    assert result.text == "Error 404 on https://apis.roblox.com/x: not found"


@pytest.mark.asyncio
async def test_configuration_error_propagates(logger):
    async def unconfigured(params):
        raise ConfigurationError("OPENAI_API_KEY")

    registry = ToolRegistry(logger)
    registry.register(_definition(handler=unconfigured))

    with pytest.raises(ConfigurationError):
        await registry.call("echo", {"text": "a"})


@pytest.mark.asyncio
async def test_generate_text_end_to_end(registry_for, ai_session):
    registry = registry_for(register_text_generation_tools)

    result = await registry.call("generate_text", {"prompt": "say hello", "temperature": 0.5})

    assert json.loads(result.text) == {"text": "hello", "model": "gpt-5.2", "usage": {"tokens": 3}}
    ai_session.generate_text.assert_awaited_once_with(
        "say hello", model=None, instructions=None, temperature=0.5, max_output_tokens=None
    )


@pytest.mark.asyncio
async def test_temperature_out_of_range_is_rejected(registry_for, ai_session):
    registry = registry_for(register_text_generation_tools)

    with pytest.raises(ToolValidationError):
        await registry.call("generate_text", {"prompt": "x", "temperature": 2.5})
    ai_session.generate_text.assert_not_awaited()


@pytest.mark.asyncio
async def test_non_numeric_universe_id_is_rejected(registry_for, roblox_api):
    registry = registry_for(register_messaging_tools)

    with pytest.raises(ToolValidationError):
        await registry.call("messaging_publish", {"topic": "t", "message": "m", "universeId": "abc"})
    assert roblox_api.requests == []


def test_to_mcp_content():
    blocks = to_mcp_content(ToolResult(content=[ImageBlock(data="AAA"), TextBlock(text="done")]))
    assert isinstance(blocks[0], types.ImageContent)
    assert blocks[0].mimeType == "image/png"
    assert isinstance(blocks[1], types.TextContent)
    assert blocks[1].text == "done"


def test_mount_registers_request_handlers(logger):
    registry = ToolRegistry(logger)
    registry.register(_definition())
    server = registry.mount(Server("test"))

    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def _call_request(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.mark.asyncio
async def test_mounted_call_tool_round_trip(logger):
    registry = ToolRegistry(logger)
    registry.register(_definition())
    handler = registry.mount(Server("test")).request_handlers[types.CallToolRequest]

    ok = await handler(_call_request("echo", {"text": "ab", "repeatCount": 2}))
    assert ok.root.isError is False
    assert [block.text for block in ok.root.content] == ["abab"]

    rejected = await handler(_call_request("echo", {"repeatCount": 2}))
    assert rejected.root.isError is True
