"""Tool families exposed by the MCP server."""
