from lightdocs.search import NOT_READY_MESSAGE, DocsSearchEngine
from lightdocs.server.jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    McpDispatcher,
    jsonrpc_error,
)


def call(dispatcher, method, params=None, id=1):
    request = {"jsonrpc": "2.0", "id": id, "method": method}
    if params is not None:
        request["params"] = params
    return dispatcher.handle(request)


def test_initialize(engine):
    response = call(McpDispatcher(engine), "initialize")
    assert response["id"] == 1
    assert response["result"]["serverInfo"]["name"] == "light-mcp"
    assert response["result"]["capabilities"] == {"tools": {}}


def test_tools_list(engine):
    response = call(McpDispatcher(engine), "tools/list")
    tools = response["result"]["tools"]
    assert [tool["name"] for tool in tools] == ["search_docs"]
    assert tools[0]["inputSchema"]["required"] == ["query"]


def test_tools_call_returns_text_content(engine):
    response = call(
        McpDispatcher(engine),
        "tools/call",
        {"name": "search_docs", "arguments": {"query": "list all rpc methods"}},
    )
    content = response["result"]["content"]
    assert content[0]["type"] == "text"
    assert "(comprehensive search)" in content[0]["text"]


def test_unknown_tool(engine):
    response = call(McpDispatcher(engine), "tools/call", {"name": "nope", "arguments": {}})
    assert response["error"]["code"] == METHOD_NOT_FOUND
    assert "nope" in response["error"]["message"]


def test_unknown_method(engine):
    response = call(McpDispatcher(engine), "resources/list")
    assert response["error"]["code"] == METHOD_NOT_FOUND


def test_missing_query(engine):
    response = call(McpDispatcher(engine), "tools/call", {"name": "search_docs", "arguments": {}})
    assert response["error"]["code"] == INVALID_PARAMS


def test_invalid_arguments(engine):
    response = call(
        McpDispatcher(engine),
        "tools/call",
        {"name": "search_docs", "arguments": {"query": "token", "content_filter": "videos"}},
    )
    assert response["error"]["code"] == INVALID_PARAMS


def test_invalid_request_shape(engine):
    dispatcher = McpDispatcher(engine)
    assert dispatcher.handle([1, 2])["error"]["code"] == INVALID_REQUEST
    assert dispatcher.handle({"id": 3})["error"]["code"] == INVALID_REQUEST
    assert dispatcher.handle({"id": 3})["id"] == 3


def test_not_ready_is_a_message_not_an_error(corpus):
    dispatcher = McpDispatcher(DocsSearchEngine(corpus))
    response = call(dispatcher, "tools/call", {"name": "search_docs", "arguments": {"query": "token"}})
    assert response["result"]["content"][0]["text"] == NOT_READY_MESSAGE


def test_error_helper_includes_data_only_when_given():
    assert "data" not in jsonrpc_error(1, -32603, "Internal error")["error"]
    assert jsonrpc_error(1, -32603, "Internal error", "boom")["error"]["data"] == "boom"


def test_non_finite_limit_is_invalid_params(engine):
    response = call(
        McpDispatcher(engine),
        "tools/call",
        {"name": "search_docs", "arguments": {"query": "token", "limit": float("inf")}},
    )
    assert response["error"]["code"] == INVALID_PARAMS
    assert "limit" in response["error"]["message"]


def test_notifications_get_no_response(engine):
    dispatcher = McpDispatcher(engine)
    assert dispatcher.handle({"jsonrpc": "2.0", "method": "notifications/initialized"}) is None
    assert dispatcher.handle({"jsonrpc": "2.0", "method": "tools/list"}) is None
