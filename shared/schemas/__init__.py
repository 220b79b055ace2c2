from shared.schemas.common import NumericId, OptionalNumericId, Temperature
from shared.schemas.tools import (
    ContentBlock,
    ImageBlock,
    ModuleManifest,
    TextBlock,
    ToolDefinition,
    ToolInput,
    ToolResult,
    ToolSpec,
)

__all__ = [
    "ContentBlock",
    "ImageBlock",
    "ModuleManifest",
    "NumericId",
    "OptionalNumericId",
    "Temperature",
    "TextBlock",
    "ToolDefinition",
    "ToolInput",
    "ToolResult",
    "ToolSpec",
]
