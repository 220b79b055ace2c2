"""Messaging tool implementation."""

from __future__ import annotations

from urllib.parse import quote

from core.registry import ToolRegistry
from core.services import Services
from modules.messaging.manifest import MANIFEST, PublishInput
from shared.responses import text_response
from shared.schemas.tools import ToolResult


class MessagingTools:
    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    async def messaging_publish(self, params: PublishInput) -> ToolResult:
        uid = params.universe_id or self.services.settings.roblox_universe_id
        url = self.client.url(
            f"/messaging-service/v1/universes/{uid}/topics/{quote(params.topic, safe='')}"
        )

        res = await self.client.post(url, json_body={"message": params.message})
        res.raise_for_status()
        return text_response(f'Message published to topic "{params.topic}" (universe {uid}).')


def register_messaging_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, MessagingTools(services))
