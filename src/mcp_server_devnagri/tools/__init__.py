"""Tools exposed by the Devnagri MCP server."""
