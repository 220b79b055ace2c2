"""MCP server core: AI session adapter, tool registry and bootstrap."""
