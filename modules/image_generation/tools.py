"""Image generation tool implementation."""

from __future__ import annotations

import json

from core.registry import ToolRegistry
from core.services import Services
from modules.image_generation.manifest import MANIFEST, GenerateImageInput
from shared.responses import image_content, text_content
from shared.schemas.tools import ContentBlock, ToolResult


class ImageGenerationTools:
    """Returns generated images as image blocks plus a metadata block."""

    def __init__(self, services: Services):
        self.services = services

    async def generate_image(self, params: GenerateImageInput) -> ToolResult:
        session = self.services.ai_session()
        result = await session.generate_image(
            params.prompt,
            size=params.size,
            quality=params.quality,
            n=params.n,
            output_format=params.output_format,
        )

        mime_type = f"image/{params.output_format or 'png'}"
        content: list[ContentBlock] = []
        for img in result.images:
            if img.b64_data:
                content.append(image_content(img.b64_data, mime_type))
            elif img.url:
                content.append(text_content(f"Image URL: {img.url}"))

        content.append(
            text_content(json.dumps({"model": result.model, "imageCount": len(result.images)}, indent=2))
        )
        return ToolResult(content=content)


def register_image_generation_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, ImageGenerationTools(services))
