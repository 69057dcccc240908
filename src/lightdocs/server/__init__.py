"""MCP and HTTP transports for lightdocs."""

from lightdocs.server.http_app import create_http_app
from lightdocs.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server", "create_http_app"]
