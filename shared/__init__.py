"""Shared configuration, logging, schemas and HTTP helpers for the MCP server."""
