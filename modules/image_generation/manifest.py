"""Image generation manifest — tool definitions."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

from core.ai.types import ImageOutputFormat, ImageQuality, ImageSize
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec


class GenerateImageInput(ToolInput):
    prompt: str = Field(description="Description of the image to generate")
    size: Optional[ImageSize] = Field(None, description="Image dimensions")
    quality: Optional[ImageQuality] = Field(None, description="Quality level")
    output_format: Optional[ImageOutputFormat] = Field(None, description="Output image format")
    n: Optional[Annotated[int, Field(ge=1, le=4)]] = Field(
        None, description="Number of images to generate (1-4)"
    )


MANIFEST = ModuleManifest(
    module_name="image_generation",
    description="Generate images with OpenAI.",
    tools=[
        ToolSpec(
            name="generate_image",
            description=(
                "Generate images using OpenAI. Provide a prompt and optional "
                "size/quality/format settings."
            ),
            input_model=GenerateImageInput,
        ),
    ],
)
