"""Local image generation tool implementation.

Images land in ``<LOCAL_ASSETS_DIR>/images/<subfolder>/<fileName>.png``.
Existing files are never overwritten.
"""

from __future__ import annotations

import base64
from pathlib import Path

from core.registry import ToolRegistry
from core.services import Services
from modules.asset_pipeline.manifest import STYLE_GUIDE
from modules.local_images.manifest import MANIFEST, GenerateAndSaveInput
from shared.responses import image_content, text_content, text_response
from shared.schemas.tools import ContentBlock, ToolResult


class LocalImageTools:
    def __init__(self, services: Services):
        self.services = services

    def target_path(self, subfolder: str, file_name: str) -> Path | None:
        """Resolve the PNG path, or None if ``file_name`` leaves the subfolder."""
        base = Path(self.services.settings.local_assets_dir).expanduser()
        folder = (base / "images" / subfolder).resolve()
        target = (folder / f"{file_name}.png").resolve()
        return target if target.parent == folder else None

    async def generate_and_save_local(self, params: GenerateAndSaveInput) -> ToolResult:
        logger = self.services.logger
        target = self.target_path(params.subfolder, params.file_name)

        if target is None:
            return text_response(
                f"⚠️ Invalid fileName: {params.file_name}\nUse a plain file name without path separators."
            )

        if target.exists():
            return text_response(
                f"⚠️ File already exists: {target}\nUse a different fileName to avoid overwriting."
            )

        if not target.parent.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            logger.info("local-image", f"Created directory: {target.parent}")

        prompt = params.prompt if params.skip_style_guide else f"{STYLE_GUIDE}{params.prompt}"
        size = params.size or "1024x1024"
        content: list[ContentBlock] = [text_content(f'⏳ Generating image for "{params.file_name}"…')]

        result = await self.services.ai_session().generate_image(
            prompt,
            size=size,
            quality=params.quality or "high",
            output_format="png",
            n=1,
        )
        image = result.images[0] if result.images else None
        if image is None or not image.b64_data:
            return text_response("❌ Image generation failed — no base64 data returned.")

        data = base64.b64decode(image.b64_data)
        target.write_bytes(data)
        logger.info("local-image", f"Saved {len(data)} bytes → {target}")

        content.append(image_content(image.b64_data, "image/png"))
        content.append(
            text_content(
                "\n".join(
                    [
                        "✅ Image saved successfully!",
                        f"📁 Path: {target}",
                        f"📐 Size: {size}",
                        f"📊 File size: {len(data) / 1024:.1f} KB",
                        f"🎨 Model: {result.model}",
                    ]
                )
            )
        )
        return ToolResult(content=content)


def register_local_image_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, LocalImageTools(services))
