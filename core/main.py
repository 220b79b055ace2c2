"""Stdio entry point for the MCP server."""

from __future__ import annotations

import anyio
from mcp.server.stdio import stdio_server

from core.server import McpApp, create_server


async def serve(app: McpApp) -> None:
    app.services.logger.info("startup", "MCP server ready on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await app.server.run(read_stream, write_stream, app.server.create_initialization_options())


def run() -> None:
    anyio.run(serve, create_server())


if __name__ == "__main__":
    run()
