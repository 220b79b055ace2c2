"""Structured logger for the MCP server.

All output goes to stderr: stdout carries JSON-RPC frames. ``LOG_LEVEL``
(debug | info | warn | error, default info) is re-read on every call, so
changing it mid-process takes effect immediately.

Lines look like::

    [2026-01-01T00:00:00.000000Z] [INFO] [tool] generate_text called {"prompt":"hi"}
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from typing import Any, TextIO

import structlog

LEVEL_ORDER: dict[str, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
}

# Tool arguments longer than this are cut in tool_call logs.
MAX_LOGGED_VALUE_CHARS = 200


def configured_level(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    level = (env.get("LOG_LEVEL") or "info").lower()
    return level if level in LEVEL_ORDER else "info"


def should_log(level: str, environ: Mapping[str, str] | None = None) -> bool:
    return LEVEL_ORDER[level] >= LEVEL_ORDER[configured_level(environ)]


def render_line(_logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
    """Render an event as ``[ts] [LEVEL] [tag] message {data}``."""
    prefix = f"[{event_dict['timestamp']}] [{method_name.upper()}] [{event_dict.get('tag', '-')}]"
    line = f"{prefix} {event_dict['event']}"
    data = event_dict.get("data")
    if data is not None:
        line = f"{line} {json.dumps(data, ensure_ascii=False, default=str, separators=(',', ':'))}"
    return line


def redact_tool_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shrink bulky tool arguments before they are logged."""
    safe = dict(params or {})
    if "fileContent" in safe:
        safe["fileContent"] = f"[base64 {len(str(safe['fileContent']))} chars]"
    value = safe.get("value")
    if isinstance(value, str) and len(value) > MAX_LOGGED_VALUE_CHARS:
        safe["value"] = f"{value[:MAX_LOGGED_VALUE_CHARS]}…"
    return safe


class ToolLogger:
    """Leveled, tagged logger writing to a side channel (stderr by default).

    Components receive an instance rather than importing a global, so tests
    can pass one bound to a ``StringIO``.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self._environ = environ
        self._log = structlog.wrap_logger(
            structlog.PrintLogger(file=stream if stream is not None else sys.stderr),
            processors=[
                self._drop_below_threshold,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                render_line,
            ],
            wrapper_class=structlog.BoundLogger,
        )

    def _drop_below_threshold(
        self, _logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        if not should_log(method_name, self._environ):
            raise structlog.DropEvent
        return event_dict

    def debug(self, tag: str, message: str, data: Any = None) -> None:
        self._log.debug(message, tag=tag, data=data)

    def info(self, tag: str, message: str, data: Any = None) -> None:
        self._log.info(message, tag=tag, data=data)

    def warn(self, tag: str, message: str, data: Any = None) -> None:
        self._log.warn(message, tag=tag, data=data)

    def error(self, tag: str, message: str, data: Any = None) -> None:
        self._log.error(message, tag=tag, data=data)

    def tool_call(self, tool_name: str, params: Mapping[str, Any] | None = None) -> None:
        """Log a tool invocation at info level."""
        self.info("tool", f"{tool_name} called", redact_tool_params(params))

    def api_response(self, endpoint: str, status: int, duration_ms: int) -> None:
        """Log an outbound API response time at debug level."""
        self.debug("api", f"{endpoint} → {status} ({duration_ms}ms)")
