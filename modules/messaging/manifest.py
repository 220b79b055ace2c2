"""Messaging manifest — tool definitions.

Docs: https://create.roblox.com/docs/cloud/reference/MessagingService
"""

from __future__ import annotations

from pydantic import Field

from shared.schemas.common import UNIVERSE_ID_DESCRIPTION, OptionalNumericId
from shared.schemas.tools import ModuleManifest, ToolInput, ToolSpec


class PublishInput(ToolInput):
    topic: str = Field(description="The topic name to publish to")
    message: str = Field(description="The message payload (string, max 1KB)")
    universe_id: OptionalNumericId = Field(None, description=UNIVERSE_ID_DESCRIPTION)


MANIFEST = ModuleManifest(
    module_name="messaging",
    description="Publish cross-server messages through Roblox MessagingService.",
    tools=[
        ToolSpec(
            name="messaging_publish",
            description=(
                "Publish a message to a Roblox MessagingService topic. All active game "
                "servers subscribed to the topic will receive it."
            ),
            input_model=PublishInput,
        ),
    ],
)
