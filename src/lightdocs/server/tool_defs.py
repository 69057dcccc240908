"""Tool definitions for tools/list."""

from lightdocs.search import CONTENT_FILTERS, SEARCH_MODES

SERVER_NAME = "light-mcp"
PROTOCOL_VERSION = "2024-11-05"

SEARCH_DOCS_DESCRIPTION = (
    "Advanced search across ZK Compression documentation with semantic understanding, "
    "context analysis, and smart ranking. Finds API methods, concepts, examples, and "
    "implementation details with high precision."
)

SEARCH_DOCS_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": (
                "Search query supporting natural language, technical terms, and concepts "
                '(e.g., "how to create compressed tokens", "validity proof verification", '
                '"RPC methods for token accounts")'
            ),
        },
        "limit": {
            "type": "number",
            "description": "Maximum number of results to return (default: 5, max: 20)",
            "default": 5,
        },
        "section": {
            "type": "string",
            "description": (
                'Filter by documentation section (e.g., "compressed-tokens", "compressed-pdas", '
                '"learn", "resources", "json-rpc-methods")'
            ),
        },
        "mode": {
            "type": "string",
            "description": (
                "Search mode: fuzzy (flexible matching), exact (precise terms), "
                "semantic (meaning-based), comprehensive (multi-layered analysis)"
            ),
            "enum": list(SEARCH_MODES),
            "default": "semantic",
        },
        "content_filter": {
            "type": "string",
            "description": "Filter by content type to focus results",
            "enum": list(CONTENT_FILTERS),
            "default": "all",
        },
        "expand_context": {
            "type": "boolean",
            "description": "Provide expanded context and related sections",
            "default": True,
        },
        "include_code": {
            "type": "boolean",
            "description": "Include code examples and snippets in results",
            "default": True,
        },
    },
    "required": ["query"],
}

TOOL_DEFINITIONS = [
    {
        "name": "search_docs",
        "description": SEARCH_DOCS_DESCRIPTION,
        "inputSchema": SEARCH_DOCS_SCHEMA,
    },
]
