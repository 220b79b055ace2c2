"""Asset pipeline tool implementation.

Flow: OpenAI image generation → Roblox asset upload → asset ID (polling the
upload operation when Roblox answers asynchronously).
"""

from __future__ import annotations

import base64
import json

from core.registry import ToolRegistry
from core.services import Services
from modules.asset_pipeline.manifest import MANIFEST, STYLE_GUIDE, GenerateAndUploadInput
from modules.assets.tools import upload_asset
from shared.responses import image_content, text_content
from shared.roblox import RobloxResponse, extract_asset_id
from shared.schemas.tools import ContentBlock, ToolResult


def _operation_id(res: RobloxResponse) -> str | None:
    body = res.json if isinstance(res.json, dict) else {}
    if body.get("done") is not False:
        return None
    if body.get("operationId"):
        return str(body["operationId"])
    path = body.get("path")
    return path.rsplit("/", 1)[-1] if isinstance(path, str) and path else None


class AssetPipelineTools:
    def __init__(self, services: Services):
        self.services = services
        self.client = services.roblox

    async def generate_and_upload_decal(self, params: GenerateAndUploadInput) -> ToolResult:
        content: list[ContentBlock] = []

        # Step 1: generate
        prompt = params.image_prompt if params.skip_style_guide else f"{STYLE_GUIDE}{params.image_prompt}"
        content.append(text_content(f'⏳ Generating image for "{params.name}"…'))

        session = self.services.ai_session()
        result = await session.generate_image(
            prompt,
            size=params.size or "1024x1024",
            quality=params.quality or "high",
            output_format="png",
            n=1,
        )
        image = result.images[0] if result.images else None
        if image is None or not image.b64_data:
            return ToolResult(
                content=[text_content("❌ Image generation failed — no base64 data returned.")]
            )
        content.append(image_content(image.b64_data, "image/png"))

        # Step 2: upload
        asset_type = params.asset_type or "Image"
        content.append(text_content(f'⏳ Uploading "{params.name}" to Roblox as {asset_type}…'))

        res = await upload_asset(
            self.client,
            display_name=params.name,
            description=params.description,
            asset_type=asset_type,
            creator={"userId": params.creator_id or self.services.settings.roblox_creator_id},
            data=base64.b64decode(image.b64_data),
            content_type="image/png",
            filename="asset.png",
        )
        if not res.ok:
            content.append(text_content(f"❌ Upload failed ({res.status}): {res.body}"))
            return ToolResult(content=content)

        # Step 3: asset ID, polling the operation if it is still running
        asset_id = extract_asset_id(res.body)
        operation_id = None if asset_id else _operation_id(res)
        if operation_id:
            content.append(text_content(f"⏳ Asset processing (operation {operation_id}), polling…"))
            settings = self.services.settings
            poll = await self.client.poll_operation(
                f"assets/v1/operations/{operation_id}",
                max_attempts=settings.operation_poll_attempts,
                interval=settings.upload_poll_interval_seconds,
            )
            if poll.done and poll.response is not None:
                asset_id = extract_asset_id(json.dumps(poll.response))
            elif poll.error:
                self.services.logger.error("asset-pipeline", "Polling failed", poll.error)

        content.append(
            text_content(
                "\n".join(
                    [
                        "✅ Asset uploaded successfully!",
                        "",
                        f"**Asset ID:** {asset_id or '(pending — check operation)'}",
                        f"**rbxassetid:** `rbxassetid://{asset_id or '???'}`",
                        f"**Display Name:** {params.name}",
                        "",
                        "**Next steps:**",
                        f"1. Verify with `thumbnail_get_assets` using asset ID: {asset_id}",
                        "2. Update the assets package TypeScript file with the new rbxassetid",
                        "",
                        "**Raw API response:**",
                        res.body,
                    ]
                )
            )
        )
        return ToolResult(content=content)


def register_asset_pipeline_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, AssetPipelineTools(services))
