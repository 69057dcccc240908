"""FastMCP server implementation for lightdocs."""

from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP

from lightdocs.search import DocsSearchEngine
from lightdocs.server.tool_defs import SEARCH_DOCS_DESCRIPTION, SERVER_NAME


def create_mcp_server(
    engine: DocsSearchEngine,
    host: str = "127.0.0.1",
    port: int = 8787,
) -> FastMCP:
    """Create an MCP server exposing the search_docs tool.

    The engine is expected to be loading (or loaded) already; calls that
    arrive before it is ready get a not-ready message.

    Args:
        engine: Search engine over the documentation corpus
        host: Bind address for the SSE transport
        port: Port for the SSE transport

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(name=SERVER_NAME, host=host, port=port)

    @mcp.tool(description=SEARCH_DOCS_DESCRIPTION)
    def search_docs(
        query: str,
        limit: int = 5,
        section: Optional[str] = None,
        mode: Literal["fuzzy", "exact", "semantic", "comprehensive"] = "semantic",
        content_filter: Literal["all", "guides", "reference", "examples", "concepts"] = "all",
        expand_context: bool = True,
        include_code: bool = True,
    ) -> str:
        """Search the ZK Compression documentation.

        Args:
            query: Natural language or keyword query (e.g., "RPC methods for token accounts")
            limit: Maximum number of results to return (default: 5, max: 20)
            section: Filter by documentation section (e.g., "compressed-tokens", "learn")
            mode: Search mode label (fuzzy, exact, semantic, comprehensive)
            content_filter: Focus on guides, reference, examples or concepts
            expand_context: Include lines around matches in reference excerpts
            include_code: Include code blocks in reference excerpts

        Returns:
            Ranked results with path, section, relevance and an excerpt
        """
        return engine.search(
            query,
            limit=limit,
            section=section,
            mode=mode,
            content_filter=content_filter,
            expand_context=expand_context,
            include_code=include_code,
        )

    return mcp
