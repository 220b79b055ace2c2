"""Instance tool implementations."""

from __future__ import annotations

import json
from urllib.parse import quote

from core.registry import ToolRegistry
from core.services import Services
from modules.instances.manifest import (
    MANIFEST,
    CreateInstanceInput,
    DeleteInstanceInput,
    GetInstanceInput,
    ListChildrenInput,
    PlaceScopedInput,
    UpdateInstanceInput,
)
from shared.responses import json_response, text_response
from shared.roblox import RobloxResponse
from shared.schemas.tools import ToolResult


class InstanceTools:
    """Tool implementations for the cloud v2 Engine instances API."""

    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    def _url(self, params: PlaceScopedInput, instance_id: str, suffix: str = "") -> str:
        settings = self.services.settings
        uid = params.universe_id or settings.roblox_universe_id
        pid = params.place_id or settings.roblox_place_id
        return self.client.url(
            f"/cloud/v2/universes/{uid}/places/{pid}/instances/{quote(instance_id, safe='')}{suffix}"
        )

    async def _resolve(self, res: RobloxResponse) -> ToolResult:
        """Unwrap an Engine API response, polling it if it is a pending operation."""
        res.raise_for_status()
        body = res.json if isinstance(res.json, dict) else None

        if body and body.get("path") and not body.get("done"):
            settings = self.services.settings
            result = await self.client.poll_operation(
                body["path"],
                max_attempts=settings.operation_poll_attempts,
                interval=settings.operation_poll_interval_seconds,
            )
            if result.response is not None:
                return json_response(result.response)
            return text_response(result.error or "Operation failed")

        if body and body.get("done") and body.get("response"):
            return json_response(body["response"])
        return json_response(res.json)

    async def instance_get(self, params: GetInstanceInput) -> ToolResult:
        res = await self.client.get(self._url(params, params.instance_id))
        return await self._resolve(res)

    async def instance_list_children(self, params: ListChildrenInput) -> ToolResult:
        query = {"pageToken": params.page_token} if params.page_token else None
        res = await self.client.get(self._url(params, params.instance_id, ":listChildren"), params=query)
        return await self._resolve(res)

    async def instance_update(self, params: UpdateInstanceInput) -> ToolResult:
        try:
            properties = json.loads(params.property_updates)
        except ValueError:
            return text_response("Error: propertyUpdates must be valid JSON")
        if not isinstance(properties, dict):
            return text_response("Error: propertyUpdates must be a JSON object")

        update_mask = ",".join(f"engineInstance.propertyData.{name}" for name in properties)
        res = await self.client.patch(
            self._url(params, params.instance_id),
            params={"updateMask": update_mask},
            json_body={"engineInstance": {"propertyData": properties}},
        )
        return await self._resolve(res)

    async def instance_create(self, params: CreateInstanceInput) -> ToolResult:
        properties = {}
        if params.properties:
            try:
                properties = json.loads(params.properties)
            except ValueError:
                return text_response("Error: properties must be valid JSON")

        res = await self.client.post(
            self._url(params, params.parent_instance_id, ":createInstance"),
            json_body={
                "engineInstance": {
                    "details": {params.class_name: {}},
                    "propertyData": properties,
                }
            },
        )
        return await self._resolve(res)

    async def instance_delete(self, params: DeleteInstanceInput) -> ToolResult:
        res = await self.client.delete(self._url(params, params.instance_id))
        res.raise_for_status()
        return text_response(f"Instance {params.instance_id} deleted successfully.")


def register_instance_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, InstanceTools(services))
