"""Thumbnails manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/features/thumbnails
Endpoint: GET https://thumbnails.roblox.com/v1/assets?assetIds=CSV&size=...&format=...
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

ThumbnailSize = Literal[
    "30x30",
    "42x42",
    "50x50",
    "60x62",
    "75x75",
    "110x110",
    "150x150",
    "180x180",
    "250x250",
    "352x352",
    "420x420",
    "512x512",
    "720x720",
]
ThumbnailFormat = Literal["Png", "Jpeg", "Webp"]


class GetAssetsInput(ToolInput):
    asset_ids: str = Field(
        description='Comma-separated asset IDs (e.g. "13498955922,14900289550"). Max ~100.'
    )
    size: ThumbnailSize = Field("420x420", description="Thumbnail size")
    format: ThumbnailFormat = Field("Png", description="Image format")
    is_circular: bool = Field(False, description="Whether to render as a circular thumbnail")


MANIFEST = ModuleManifest(
    module_name="thumbnails",
    description="Resolve CDN thumbnail URLs for Roblox assets.",
    tools=[
        ToolSpec(
            name="thumbnail_get_assets",
            description=(
                "Get thumbnail image URLs for Roblox assets (decals, models, etc.). "
                "Returns CDN URLs for up to 100 assets at once. No auth required. "
                'Thumbnails may be "Pending" on first request — the tool auto-retries once.'
            ),
            input_model=GetAssetsInput,
        ),
    ],
)
