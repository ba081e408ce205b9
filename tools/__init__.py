"""MCP tool modules registered on the shared server."""
