"""Thumbnail tool implementation."""

from __future__ import annotations

from typing import Any

from core.registry import ToolRegistry
from core.services import Services
from modules.thumbnails.manifest import MANIFEST, GetAssetsInput
from shared.responses import json_response, success_response
from shared.roblox import RobloxResponse
from shared.schemas.tools import ToolResult

PENDING = "Pending"


def all_pending(body: Any) -> bool:
    """True when the result set is non-empty and every item is still Pending."""
    items = body.get("data") if isinstance(body, dict) else None
    if not items:
        return False
    return all(isinstance(item, dict) and item.get("state") == PENDING for item in items)


class ThumbnailTools:
    def __init__(self, services: Services):
        self.services = services
        self.client = services.thumbnails

    async def _fetch(self, params: GetAssetsInput) -> RobloxResponse:
        return await self.client.get(
            self.client.url("/v1/assets"),
            params={
                "assetIds": params.asset_ids,
                "size": params.size,
                "format": params.format,
                "isCircular": "true" if params.is_circular else "false",
            },
            auth=False,
        )

    async def thumbnail_get_assets(self, params: GetAssetsInput) -> ToolResult:
        res = await self._fetch(params)
        res.raise_for_status()

        # Freshly requested thumbnails render asynchronously: wait once, refetch once.
        if all_pending(res.json):
            delay = self.services.settings.thumbnail_retry_delay_seconds
            self.services.logger.debug("thumbnails", f"All thumbnails pending, retrying in {delay}s")
            await self.services.sleep(delay)
            res = await self._fetch(params)

        if res.json is None:
            return success_response(res.body)
        return json_response(res.json)


def register_thumbnail_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, ThumbnailTools(services))
