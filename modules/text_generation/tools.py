"""Text generation tool implementation."""

from __future__ import annotations

from core.registry import ToolRegistry
from core.services import Services
from modules.text_generation.manifest import MANIFEST, GenerateTextInput
from shared.responses import json_response
from shared.schemas.tools import ToolResult


class TextGenerationTools:
    """Forwards prompts to the AI session."""

    def __init__(self, services: Services):
        self.services = services

    async def generate_text(self, params: GenerateTextInput) -> ToolResult:
        session = self.services.ai_session()
        result = await session.generate_text(
            params.prompt,
            model=params.model,
            instructions=params.instructions,
            temperature=params.temperature,
            max_output_tokens=params.max_output_tokens,
        )
        return json_response({"text": result.text, "model": result.model, "usage": result.usage})


def register_text_generation_tools(registry: ToolRegistry, services: Services) -> None:
    registry.register_module(MANIFEST, TextGenerationTools(services))
