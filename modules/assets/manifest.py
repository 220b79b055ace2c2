"""Assets manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/Asset
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional

from pydantic import Field

from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

CreatorType = Literal["User", "Group"]


class GetInfoInput(ToolInput):
    asset_id: str = Field(description="The asset ID to look up")


class ListAssetsInput(ToolInput):
    creator_type: CreatorType = Field(description="Type of creator")
    creator_id: str = Field(description="The user or group ID")
    asset_type: Optional[str] = Field(
        None, description='Filter by asset type (e.g. "Decal", "Audio", "Model")'
    )
    page_size: Optional[Annotated[int, Field(ge=1, le=50)]] = Field(None, description="Results per page")
    page_token: Optional[str] = Field(None, description="Pagination token from a previous response")


class UploadInput(ToolInput):
    name: str = Field(description="Display name for the asset")
    description: Optional[str] = Field(None, description="Asset description")
    asset_type: str = Field(description='Asset type (e.g. "Decal", "Audio", "Model")')
    creator_type: CreatorType = Field(description="Creator type")
    creator_id: str = Field(description="Creator user or group ID")
    file_content: str = Field(description="Base64-encoded file content")
    content_type: str = Field(description='MIME type of the file (e.g. "image/png", "audio/ogg")')


MANIFEST = ModuleManifest(
    module_name="assets",
    description="Inspect, list and upload Roblox assets via Open Cloud.",
    tools=[
        ToolSpec(
            name="asset_get_info",
            description="Get information about a Roblox asset by its ID.",
            input_model=GetInfoInput,
        ),
        ToolSpec(
            name="asset_list",
            description="List assets owned by a user or group.",
            input_model=ListAssetsInput,
        ),
        ToolSpec(
            name="asset_upload",
            description=(
                "Upload a new asset to Roblox (creates via the Open Cloud Assets API). "
                "Provide the asset as base64-encoded file data."
            ),
            input_model=UploadInput,
        ),
    ],
)
