"""Asset pipeline manifest — tool definitions."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from core.ai.types import ImageQuality, ImageSize
from shared.schemas.common import OptionalNumericId
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

# Prepended to every icon prompt unless skipStyleGuide is set.
STYLE_GUIDE = (
    "A stylized RPG icon, dark fantasy art style, 2D game UI icon, "
    "centered composition, dark textured stone-like background, "
    "soft ambient lighting with mystical glow, moderate detail, "
    "symmetrical design, suitable for a Roblox game HUD. No text. "
)


class GenerateAndUploadInput(ToolInput):
    name: str = Field(description='Display name for the asset (e.g. "ScholarsInsight")')
    description: str = Field(description="Short description of the icon for the Roblox asset metadata")
    image_prompt: str = Field(
        description=(
            "Visual description of what the icon should depict. The RPG style guide is "
            "prepended automatically. Focus on subject, colors, and distinctive elements."
        )
    )
    creator_id: OptionalNumericId = Field(
        None, description="Roblox user ID for the creator (default: env ROBLOX_CREATOR_ID)"
    )
    size: Optional[ImageSize] = Field(None, description="Image dimensions (default: 1024x1024)")
    quality: Optional[ImageQuality] = Field(None, description="Image quality (default: high)")
    skip_style_guide: Optional[bool] = Field(
        None, description="If true, do not prepend the default RPG style guide to the prompt"
    )
    asset_type: Optional[Literal["Decal", "Image"]] = Field(
        None,
        description='Roblox asset type: "Image" for ImageLabel usage, "Decal" for Decal instances (default: "Image")',
    )


MANIFEST = ModuleManifest(
    module_name="asset_pipeline",
    description="Generate an image with OpenAI and upload it to Roblox in one step.",
    tools=[
        ToolSpec(
            name="generate_and_upload_decal",
            description=(
                "Generate an AI image and upload it to Roblox in one step. "
                "Returns the new asset ID. Use thumbnail_get_assets afterward to verify. "
                "A consistent dark-fantasy RPG style guide is automatically applied. "
                'Use assetType "Image" for ImageLabel usage, "Decal" for Decal instances.'
            ),
            input_model=GenerateAndUploadInput,
        ),
    ],
)
