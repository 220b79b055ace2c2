"""Text generation manifest — tool definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from shared.schemas.common import Temperature
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec


class GenerateTextInput(ToolInput):
    prompt: str = Field(description="The text prompt to send to the model")
    model: Optional[str] = Field(None, description='Override the model (e.g. "gpt-5-mini")')
    instructions: Optional[str] = Field(None, description="System-level instructions for the model")
    temperature: Temperature = Field(None, description="Sampling temperature (0-2)")
    max_output_tokens: Optional[int] = Field(None, description="Maximum tokens to generate")


MANIFEST = ModuleManifest(
    module_name="text_generation",
    description="Generate text with OpenAI.",
    tools=[
        ToolSpec(
            name="generate_text",
            description=(
                "Generate text using OpenAI. Provide a prompt and optional "
                "model/temperature overrides."
            ),
            input_model=GenerateTextInput,
        ),
    ],
)
