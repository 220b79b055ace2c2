"""Image analysis tool implementation."""

from __future__ import annotations

from core.registry import ToolRegistry
from core.services import Services
from modules.image_analysis.manifest import MANIFEST, AnalyzeImageInput
from shared.responses import json_response
from shared.schemas.tools import ToolResult


class ImageAnalysisTools:
    def __init__(self, services: Services):
        self.services = services

    async def analyze_image(self, params: AnalyzeImageInput) -> ToolResult:
        session = self.services.ai_session()
        kwargs = {}
        # The session defaults to a deterministic temperature of 0.
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature
        result = await session.analyze_image(
            str(params.image_url),
            params.prompt,
            model=params.model,
            instructions=params.instructions,
            max_output_tokens=params.max_output_tokens,
            **kwargs,
        )
        return json_response({"analysis": result.text, "model": result.model, "usage": result.usage})


def register_image_analysis_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, ImageAnalysisTools(services))
