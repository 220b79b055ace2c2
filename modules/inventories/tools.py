"""Inventory tool implementations."""

from __future__ import annotations

import json
from urllib.parse import quote

from core.registry import ToolRegistry
from core.services import Services
from modules.inventories.manifest import (
    MANIFEST,
    CheckOwnershipInput,
    ListCollectiblesInput,
    ListItemsInput,
)
from shared.responses import success_response, text_response
from shared.schemas.tools import ToolResult


class InventoryTools:
    """Tool implementations for the cloud v2 inventory-items API."""

    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    def _url(self, user_id: str | None) -> str:
        uid = user_id or self.services.settings.roblox_user_id
        return self.client.url(f"/cloud/v2/users/{quote(uid, safe='')}/inventory-items")

    async def inventory_list_items(self, params: ListItemsInput) -> ToolResult:
        query = {"maxPageSize": str(params.max_page_size)}
        if params.filter:
            query["filter"] = params.filter
        if params.page_token:
            query["pageToken"] = params.page_token

        res = await self.client.get(self._url(params.user_id), params=query)
        res.raise_for_status()
        return success_response(res.body)

    async def inventory_check_ownership(self, params: CheckOwnershipInput) -> ToolResult:
        res = await self.client.get(
            self._url(params.user_id),
            params={"filter": f"assetIds={params.asset_ids}"},
        )
        res.raise_for_status()

        data = res.json if isinstance(res.json, dict) else {}
        owned = [item.get("assetDetails") for item in data.get("inventoryItems") or []]
        if not owned:
            return text_response("User does not own any of the requested assets.")
        return text_response(
            f"User owns {len(owned)} of the requested assets:\n{json.dumps(owned, indent=2)}"
        )

    async def inventory_list_collectibles(self, params: ListCollectiblesInput) -> ToolResult:
        types = params.asset_types or "*"
        query = {
            "filter": f"onlyCollectibles=true;inventoryItemAssetTypes={types}",
            "maxPageSize": str(params.max_page_size),
        }
        if params.page_token:
            query["pageToken"] = params.page_token

        res = await self.client.get(self._url(params.user_id), params=query)
        res.raise_for_status()
        return success_response(res.body)


def register_inventory_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, InventoryTools(services))
