"""Local image generation manifest — tool definitions."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from core.ai.types import ImageQuality, ImageSize
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec

# Known subfolders under <LOCAL_ASSETS_DIR>/images
ImageSubfolder = Literal[
    "characters-portraits",
    "design-images-prototypes",
    "icons",
    "part-textures",
    "particle-emitter-textures",
    "raw",
    "skybox-sets",
    "slice-frames",
    "ui-instance-background",
]


class GenerateAndSaveInput(ToolInput):
    prompt: str = Field(
        description=(
            "Visual description of what the image should depict. The RPG style guide is "
            "prepended automatically. Focus on subject, colors, and distinctive elements."
        )
    )
    file_name: str = Field(
        description=(
            'File name without extension, following the naming convention: "Icon - Frozen Shield", '
            '"Portrait - Penitent Knight", "Panel Texture - Cyber Domain", etc.'
        )
    )
    subfolder: ImageSubfolder = Field(description="Target subfolder within the images directory")
    size: Optional[ImageSize] = Field(None, description="Image dimensions (default: 1024x1024)")
    quality: Optional[ImageQuality] = Field(None, description="Image quality (default: high)")
    skip_style_guide: Optional[bool] = Field(
        None, description="If true, do not prepend the default RPG style guide to the prompt"
    )


MANIFEST = ModuleManifest(
    module_name="local_images",
    description="Generate images with OpenAI and save them as PNGs in the local assets folder.",
    tools=[
        ToolSpec(
            name="generate_and_save_local",
            description=(
                "Generate an AI image and save it locally to the assets folder. "
                'Provide a fileName following the naming convention (e.g. "Icon - Frozen Shield"). '
                "The .png extension is added automatically. "
                "A dark-fantasy RPG style guide is prepended unless skipStyleGuide is true."
            ),
            input_model=GenerateAndSaveInput,
        ),
    ],
)
