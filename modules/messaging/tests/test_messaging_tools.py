"""Tests for messaging_publish."""

from __future__ import annotations

import json

import pytest

from modules.messaging.tools import register_messaging_tools


@pytest.fixture
def registry(registry_for):
    return registry_for(register_messaging_tools)


@pytest.mark.asyncio
async def test_publish_success(registry, roblox_api):
    roblox_api.queue(200, text="")

    result = await registry.call("messaging_publish", {"topic": "t", "message": "m"})

    assert 'topic "t"' in result.text
    assert "9730686096" in result.text
    request = roblox_api.last
    assert request.method == "POST"
    assert request.url.path == "/messaging-service/v1/universes/9730686096/topics/t"
    assert request.headers["x-api-key"] == "rbx-test-key"
    assert json.loads(request.content) == {"message": "m"}


@pytest.mark.asyncio
async def test_publish_escapes_topic_and_uses_given_universe(registry, roblox_api):
    result = await registry.call(
        "messaging_publish", {"topic": "a/b c", "message": "m", "universeId": "123"}
    )

    assert roblox_api.last.url.raw_path.decode().endswith("/universes/123/topics/a%2Fb%20c")
    assert "(universe 123)" in result.text


@pytest.mark.asyncio
async def test_publish_forbidden(registry, roblox_api, log_stream):
    roblox_api.queue(403, text="forbidden")

    result = await registry.call("messaging_publish", {"topic": "t", "message": "m"})

    assert "403" in result.text
    assert "forbidden" in result.text
    assert "[ERROR] [tool-response]" in log_stream.getvalue()
