"""Assets tool implementations."""

from __future__ import annotations

import base64
import json
from urllib.parse import quote

from core.registry import ToolRegistry
from core.services import Services
from modules.assets.manifest import MANIFEST, GetInfoInput, ListAssetsInput, UploadInput
from shared.responses import success_response, text_response
from shared.roblox import RobloxCloudClient, RobloxResponse
from shared.schemas.tools import ToolResult

ASSETS_PATH = "/assets/v1/assets"


async def upload_asset(
    client: RobloxCloudClient,
    *,
    display_name: str,
    description: str,
    asset_type: str,
    creator: dict[str, str],
    data: bytes,
    content_type: str,
    filename: str = "asset",
) -> RobloxResponse:
    """POST a multipart create-asset request (``request`` JSON + ``fileContent``)."""
    metadata = {
        "assetType": asset_type,
        "displayName": display_name,
        "description": description,
        "creationContext": {"creator": creator},
    }
    files = {
        "request": (None, json.dumps(metadata), "application/json"),
        "fileContent": (filename, data, content_type),
    }
    return await client.post(client.url(ASSETS_PATH), files=files)


class AssetTools:
    """Tool implementations for the Open Cloud Assets v1 API."""

    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    async def asset_get_info(self, params: GetInfoInput) -> ToolResult:
        url = self.client.url(f"{ASSETS_PATH}/{quote(params.asset_id, safe='')}")
        res = await self.client.get(url)
        res.raise_for_status()
        return success_response(res.body)

    async def asset_list(self, params: ListAssetsInput) -> ToolResult:
        query = {
            "creatorType": params.creator_type,
            "creatorTargetId": params.creator_id,
        }
        if params.asset_type:
            query["assetType"] = params.asset_type
        if params.page_size:
            query["pageSize"] = str(params.page_size)
        if params.page_token:
            query["pageToken"] = params.page_token

        res = await self.client.get(self.client.url(ASSETS_PATH), params=query)
        res.raise_for_status()
        return success_response(res.body)

    async def asset_upload(self, params: UploadInput) -> ToolResult:
        res = await upload_asset(
            self.client,
            display_name=params.name,
            description=params.description or "",
            asset_type=params.asset_type,
            creator={f"{params.creator_type.lower()}Id": params.creator_id},
            data=base64.b64decode(params.file_content),
            content_type=params.content_type,
        )
        res.raise_for_status()
        return text_response(f"Asset uploaded successfully.\n{res.body}")


def register_asset_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, AssetTools(services))
