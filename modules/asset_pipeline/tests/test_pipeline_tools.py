"""Tests for generate_and_upload_decal."""

from __future__ import annotations

import json

import pytest

from core.ai.types import ImageGenerationResult
from modules.asset_pipeline.manifest import STYLE_GUIDE
from modules.asset_pipeline.tools import register_asset_pipeline_tools
from shared.schemas.tools import ImageBlock

ARGS = {"name": "ScholarsInsight", "description": "Book icon", "imagePrompt": "an open glowing book"}


@pytest.fixture
def registry(registry_for):
    return registry_for(register_asset_pipeline_tools)


def _multipart_metadata(request) -> dict:
    body = request.content.decode("latin-1")
    start = body.index('{"assetType"')
    return json.loads(body[start : body.index("\r\n", start)])


@pytest.mark.asyncio
async def test_upload_with_immediate_asset_id(registry, roblox_api, ai_session):
    roblox_api.queue(200, {"assetId": "999"})

    result = await registry.call("generate_and_upload_decal", ARGS)

    prompt = ai_session.generate_image.await_args.args[0]
    assert prompt == f"{STYLE_GUIDE}an open glowing book"
    assert ai_session.generate_image.await_args.kwargs["size"] == "1024x1024"
    assert ai_session.generate_image.await_args.kwargs["quality"] == "high"

    assert isinstance(result.content[1], ImageBlock)
    assert "rbxassetid://999" in result.text
    assert len(roblox_api.requests) == 1

    metadata = _multipart_metadata(roblox_api.last)
    assert metadata["assetType"] == "Image"
    assert metadata["displayName"] == "ScholarsInsight"
    assert metadata["creationContext"] == {"creator": {"userId": "3394700055"}}


@pytest.mark.asyncio
async def test_skip_style_guide_and_decal_type(registry, roblox_api, ai_session):
    roblox_api.queue(200, {"assetId": "1"})

    await registry.call(
        "generate_and_upload_decal",
        {**ARGS, "skipStyleGuide": True, "assetType": "Decal", "creatorId": "42"},
    )

    assert ai_session.generate_image.await_args.args[0] == "an open glowing book"
    metadata = _multipart_metadata(roblox_api.last)
    assert metadata["assetType"] == "Decal"
    assert metadata["creationContext"] == {"creator": {"userId": "42"}}


@pytest.mark.asyncio
async def test_pending_operation_is_polled(registry, roblox_api, sleep):
    roblox_api.queue(200, {"path": "operations/op-1", "operationId": "op-1", "done": False})
    roblox_api.queue(200, {"done": False})
    roblox_api.queue(200, {"done": True, "response": {"assetId": "1234"}})

    result = await registry.call("generate_and_upload_decal", ARGS)

    assert "rbxassetid://1234" in result.text
    assert str(roblox_api.requests[1].url).endswith("/assets/v1/operations/op-1")
    assert len(roblox_api.requests) == 3
    sleep.assert_awaited_once_with(3.0)


@pytest.mark.asyncio
async def test_upload_failure(registry, roblox_api):
    roblox_api.queue(401, text="Invalid API key")

    result = await registry.call("generate_and_upload_decal", ARGS)

    assert "Upload failed (401): Invalid API key" in result.text
    assert isinstance(result.content[1], ImageBlock)


@pytest.mark.asyncio
async def test_generation_without_image_data(registry, roblox_api, ai_session):
    ai_session.generate_image.return_value = ImageGenerationResult(images=[], model="gpt-image-1")

    result = await registry.call("generate_and_upload_decal", ARGS)

    assert "no base64 data" in result.text
    assert roblox_api.requests == []
