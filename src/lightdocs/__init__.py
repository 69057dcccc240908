"""lightdocs - ZK Compression documentation search over MCP."""

__version__ = "1.1.1"
