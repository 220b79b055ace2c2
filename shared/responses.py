"""Helpers that shape handler output into ``ToolResult`` envelopes."""

from __future__ import annotations

import json
from typing import Any

from shared.errors import HttpStatusError
from shared.log import ToolLogger
from shared.schemas.tools import ImageBlock, TextBlock, ToolResult


def text_content(text: str) -> TextBlock:
    return TextBlock(text=text)


def image_content(b64_data: str, mime_type: str = "image/png") -> ImageBlock:
    return ImageBlock(data=b64_data, mime_type=mime_type)


def text_response(text: str) -> ToolResult:
    return ToolResult(content=[text_content(text)])


def success_response(body: str) -> ToolResult:
    """Wrap a raw API body."""
    return text_response(body)


def json_response(data: Any) -> ToolResult:
    """Wrap a JSON-serializable value, pretty-printed."""
    return text_response(json.dumps(data, indent=2, ensure_ascii=False))


def error_response(
    status: int,
    body: str,
    endpoint: str | None = None,
    logger: ToolLogger | None = None,
) -> ToolResult:
    """Describe a non-2xx response as a tool result (never raised)."""
    message = HttpStatusError(status, body, endpoint).describe()
    if logger is not None:
        logger.error("tool-response", message)
    return text_response(message)
