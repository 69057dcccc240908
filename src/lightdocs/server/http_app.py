"""Plain HTTP surface: JSON-RPC over POST and a minimal event stream."""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from lightdocs import __version__
from lightdocs.search import DocsSearchEngine
from lightdocs.server.jsonrpc import PARSE_ERROR, McpDispatcher, jsonrpc_error

logger = logging.getLogger(__name__)

SSE_READY_EVENT = 'data: {"type":"connection","status":"ready"}\n\n'


def create_http_app(engine: DocsSearchEngine) -> FastAPI:
    """Create a FastAPI app serving search_docs over JSON-RPC.

    The corpus starts loading in the background when the app starts;
    requests made before it finishes get the not-ready message.
    """
    dispatcher = McpDispatcher(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not engine.is_ready:
            engine.start_loading()
        yield

    app = FastAPI(title="lightdocs", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Cache-Control"],
    )

    async def dispatch(request: Request) -> Response:
        body = await request.body()
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Rejected malformed request: {e}")
            return JSONResponse(
                jsonrpc_error(None, PARSE_ERROR, "Parse error", str(e)),
                status_code=400,
            )
        response = await run_in_threadpool(dispatcher.handle, payload)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(response)

    @app.post("/mcp")
    async def mcp_endpoint(request: Request) -> Response:
        return await dispatch(request)

    @app.post("/sse")
    async def sse_message(request: Request) -> Response:
        return await dispatch(request)

    @app.get("/sse")
    async def sse_connect() -> Response:
        return Response(
            content=SSE_READY_EVENT,
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
        )

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok" if engine.is_ready else "loading",
            "documents": len(engine.documents),
        }

    return app
