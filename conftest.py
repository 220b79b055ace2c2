"""Fixtures shared by tests/ and the per-module test folders.

Outbound HTTP goes through ``httpx.MockTransport`` and OpenAI through a
stubbed session, so no test touches the network.
"""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from core.ai.types import GeneratedImage, ImageGenerationResult, TextGenerationResult
from core.registry import ToolRegistry
from core.services import Services, build_services
from shared.config import Settings
from shared.env import EnvResolver
from shared.log import ToolLogger

TEST_ENV = {
    "ROBLOX_CLOUD_API_KEY": "rbx-test-key",
    "OPENAI_API_KEY": "sk-test",
    "LOG_LEVEL": "debug",
}


class FakeRobloxApi:
    """Records requests and replays queued responses (last one repeats)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, status: int = 200, body: Any = None, text: str | None = None) -> None:
        if text is None:
            text = json.dumps(body if body is not None else {})
        self._responses.append(httpx.Response(status, text=text))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, text="{}")
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def environ() -> dict[str, str]:
    return dict(TEST_ENV)


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream, environ) -> ToolLogger:
    return ToolLogger(stream=log_stream, environ=environ)


@pytest.fixture
def env_resolver(environ, tmp_path) -> EnvResolver:
    return EnvResolver(default_path=tmp_path / "missing.env", environ=environ)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        roblox_universe_id="9730686096",
        roblox_place_id="87666753607582",
        roblox_creator_id="3394700055",
        roblox_user_id="3394700055",
        local_assets_dir=str(tmp_path / "assets"),
        monorepo_packages_dir=str(tmp_path / "packages"),
    )


@pytest.fixture
def roblox_api() -> FakeRobloxApi:
    return FakeRobloxApi()


@pytest.fixture
def ai_session() -> MagicMock:
    """Stub AI session with canned text and image results."""
    session = MagicMock()
    session.generate_text = AsyncMock(
        return_value=TextGenerationResult(text="hello", model="gpt-5.2", usage={"tokens": 3})
    )
    session.analyze_image = AsyncMock(
        return_value=TextGenerationResult(text="a red gem", model="gpt-4o", usage={"tokens": 7})
    )
    session.generate_image = AsyncMock(
        return_value=ImageGenerationResult(
            images=[GeneratedImage(b64_data="aGVsbG8=")],  # b"hello"
            model="gpt-image-1",
        )
    )
    return session


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def services(settings, env_resolver, logger, roblox_api, ai_session, sleep) -> Services:
    return build_services(
        settings,
        env_resolver,
        logger,
        transport=roblox_api.transport(),
        ai_session_factory=lambda: ai_session,
        sleep=sleep,
    )


@pytest.fixture
def registry_for(services) -> Callable[..., ToolRegistry]:
    """Build a registry with the given ``register_*`` functions applied."""

    def _build(*registrars) -> ToolRegistry:
        registry = ToolRegistry(services.logger)
        for register in registrars:
            register(registry, services)
        return registry

    return _build
