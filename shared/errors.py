"""Error taxonomy surfaced to tool callers."""

from __future__ import annotations

from typing import Any

import httpx

# Network / DNS failures propagate unchanged from httpx.
TransportError = httpx.TransportError


class ConfigurationError(RuntimeError):
    """A required credential or setting is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(
            message
            or (
                f"Missing required environment variable: {key}\n"
                "  → Make sure it is set in your .env file or shell environment.\n"
                "  → See .env.example for reference."
            )
        )


class HttpStatusError(Exception):
    """A non-2xx response from an external API.

    Never reaches the tool caller as an exception: the registry turns it
    into an ordinary tool result describing the status and body.
    """

    def __init__(self, status: int, body: str, endpoint: str | None = None):
        self.status = status
        self.body = body
        self.endpoint = endpoint
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.endpoint:
            return f"Error {self.status} on {self.endpoint}: {self.body}"
        return f"Error {self.status}: {self.body}"


class ToolValidationError(ValueError):
    """Tool arguments were rejected before the handler ran."""

    def __init__(self, tool_name: str, errors: list[dict[str, Any]] | None = None, message: str | None = None):
        self.tool_name = tool_name
        self.errors = errors or []
        if message is None:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
                for err in self.errors
            )
            message = f"Invalid arguments for {tool_name}: {details}"
        super().__init__(message)


class DuplicateToolError(ValueError):
    """Two tools were registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool already registered: {name}")
