"""JSON-RPC 2.0 handling for the HTTP transport.

See: https://www.jsonrpc.org/specification
"""

import logging
from typing import Any, Optional

from lightdocs import __version__
from lightdocs.search import DocsSearchEngine, InvalidQueryError
from lightdocs.server.tool_defs import PROTOCOL_VERSION, SERVER_NAME, TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

SEARCH_ARGUMENTS = (
    "limit",
    "section",
    "mode",
    "content_filter",
    "expand_context",
    "include_code",
)


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str, data: Any = None) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (can be None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message
        data: Optional extra detail

    Returns:
        JSON-RPC 2.0 error response dict
    """
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": id, "error": error}


def text_content(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}]}


class McpDispatcher:
    """Answers MCP requests for a single search engine."""

    def __init__(self, engine: DocsSearchEngine):
        self.engine = engine

    def handle(self, request: Any) -> Optional[dict]:
        """Dispatch one decoded JSON-RPC request. Never raises.

        Returns:
            The response, or None for a notification (a request without an id)
        """
        if not isinstance(request, dict) or not isinstance(request.get("method"), str):
            request_id = request.get("id") if isinstance(request, dict) else None
            return jsonrpc_error(request_id, INVALID_REQUEST, "Invalid Request")

        request_id = request.get("id")
        method = request["method"]
        params = request.get("params") or {}

        if "id" not in request:
            logger.debug(f"Ignoring notification {method}")
            return None

        try:
            if method == "initialize":
                return jsonrpc_response(
                    request_id,
                    {
                        "protocolVersion": PROTOCOL_VERSION,
                        "capabilities": {"tools": {}},
                        "serverInfo": {"name": SERVER_NAME, "version": __version__},
                    },
                )
            if method == "ping":
                return jsonrpc_response(request_id, {})
            if method == "tools/list":
                return jsonrpc_response(request_id, {"tools": TOOL_DEFINITIONS})
            if method == "tools/call":
                return self._call_tool(request_id, params)
            return jsonrpc_error(request_id, METHOD_NOT_FOUND, f"Method '{method}' not found")
        except Exception as e:
            logger.exception(f"Error handling {method}")
            return jsonrpc_error(request_id, INTERNAL_ERROR, "Internal error", str(e))

    def _call_tool(self, request_id: Any, params: dict) -> dict:
        name = params.get("name")
        if name != "search_docs":
            return jsonrpc_error(request_id, METHOD_NOT_FOUND, f"Tool '{name}' not found")

        arguments = params.get("arguments") or {}
        query = arguments.get("query")
        if not isinstance(query, str) or not query.strip():
            return jsonrpc_error(request_id, INVALID_PARAMS, "Query parameter is required")

        options = {key: arguments[key] for key in SEARCH_ARGUMENTS if arguments.get(key) is not None}
        try:
            text = self.engine.search(query, **options)
        except (InvalidQueryError, TypeError, ValueError) as e:
            return jsonrpc_error(request_id, INVALID_PARAMS, str(e))

        return jsonrpc_response(request_id, text_content(text))
