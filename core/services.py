"""Dependencies handed to every tool family at registration time."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from core.ai.session import AISession, create_ai_session_from_env
from shared.config import Settings
from shared.env import EnvResolver
from shared.log import ToolLogger
from shared.roblox import THUMBNAILS_BASE, RobloxCloudClient


@dataclass
class Services:
    """Settings, logger, clients and factories shared by the tool handlers."""

    settings: Settings
    env: EnvResolver
    logger: ToolLogger
    roblox: RobloxCloudClient
    thumbnails: RobloxCloudClient
    ai_session_factory: Callable[[], AISession]
    sleep: Callable[[float], Awaitable[Any]] = field(default=asyncio.sleep)

    def ai_session(self) -> AISession:
        """Build a fresh AI session (raises ConfigurationError without a key)."""
        return self.ai_session_factory()


def build_services(
    settings: Settings,
    env: EnvResolver,
    logger: ToolLogger,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    ai_session_factory: Callable[[], AISession] | None = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> Services:
    """Wire the default clients from ``settings``.

    ``transport`` and ``ai_session_factory`` exist so tests can stub the
    outbound HTTP and OpenAI sides.
    """

    def roblox_api_key() -> str:
        return env.roblox_cloud_config().api_key

    def default_ai_session() -> AISession:
        return create_ai_session_from_env(
            env,
            logger,
            default_text_model=settings.openai_text_model,
            default_image_model=settings.openai_image_model,
            default_vision_model=settings.openai_vision_model,
            max_retries=settings.openai_max_retries,
            timeout_ms=settings.openai_timeout_ms,
        )

    roblox = RobloxCloudClient(
        roblox_api_key,
        logger,
        timeout=settings.http_timeout_seconds,
        transport=transport,
        sleep=sleep,
    )
    thumbnails = RobloxCloudClient(
        roblox_api_key,
        logger,
        base_url=THUMBNAILS_BASE,
        timeout=settings.http_timeout_seconds,
        transport=transport,
        sleep=sleep,
    )

    return Services(
        settings=settings,
        env=env,
        logger=logger,
        roblox=roblox,
        thumbnails=thumbnails,
        ai_session_factory=ai_session_factory or default_ai_session,
        sleep=sleep,
    )
