"""Image analysis manifest — tool definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import AnyUrl, Field

from shared.schemas.common import Temperature
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec


class AnalyzeImageInput(ToolInput):
    image_url: AnyUrl = Field(description="Public URL of the image to analyze")
    prompt: str = Field(
        description='What to analyze or classify about the image (e.g. "Categorize this Roblox decal")'
    )
    model: Optional[str] = Field(
        None, description="Override the model (default: gpt-4o). Must be vision-capable."
    )
    instructions: Optional[str] = Field(None, description="System-level instructions for the model")
    temperature: Temperature = Field(None, description="Sampling temperature (0-2)")
    max_output_tokens: Optional[int] = Field(None, description="Maximum tokens to generate")


MANIFEST = ModuleManifest(
    module_name="image_analysis",
    description="Analyze images with a vision-capable model.",
    tools=[
        ToolSpec(
            name="analyze_image",
            description=(
                "Analyze an image using a vision-capable AI model (GPT-4o by default). "
                "Provide an image URL and a prompt describing what to analyze. "
                "Useful for categorizing decals, describing textures, reading text in images, etc."
            ),
            input_model=AnalyzeImageInput,
        ),
    ],
)
