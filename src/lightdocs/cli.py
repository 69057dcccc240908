"""CLI entry point for lightdocs."""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Literal, cast

from lightdocs import installer
from lightdocs.config import DEFAULT_HOST, DEFAULT_PORT, resolve_docs_root
from lightdocs.search import CONTENT_FILTERS, SEARCH_MODES, DocsSearchEngine, InvalidQueryError

# stdout carries the MCP stdio channel, so logs go to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _load_engine(docs_root: str | None) -> DocsSearchEngine:
    root = resolve_docs_root(docs_root)
    if not root.is_dir():
        logger.error(f"Documentation folder not found: {root}")
        sys.exit(1)
    engine = DocsSearchEngine(root)
    engine.load()
    return engine


def serve(
    docs_root: str | None = None,
    transport: str = "stdio",
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Start the search server.

    Args:
        docs_root: Markdown corpus folder (defaults from config)
        transport: stdio or sse (MCP SDK), or http (JSON-RPC over FastAPI)
        host: Bind address for network transports
        port: Port for network transports
    """
    root = resolve_docs_root(docs_root)
    if not root.is_dir():
        logger.warning(f"Documentation folder not found: {root}")

    engine = DocsSearchEngine(root)

    # Import here to avoid loading server stacks unless needed
    if transport == "http":
        import uvicorn

        from lightdocs.server import create_http_app

        logger.info(f"Serving {root} via http on {host}:{port}")
        uvicorn.run(create_http_app(engine), host=host, port=port)
        return

    from lightdocs.server import create_mcp_server

    engine.start_loading()
    logger.info(f"Serving {root} via {transport}")
    mcp = create_mcp_server(engine, host=host, port=port)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))
    logger.info("Light MCP server stopped")


def search(
    query: str,
    docs_root: str | None = None,
    limit: int = 5,
    section: str | None = None,
    mode: str = "semantic",
    content_filter: str = "all",
    expand_context: bool = True,
    include_code: bool = True,
) -> None:
    """Run a single query and print the formatted results."""
    engine = _load_engine(docs_root)
    try:
        text = engine.search(
            query,
            limit=limit,
            section=section,
            mode=mode,
            content_filter=content_filter,
            expand_context=expand_context,
            include_code=include_code,
        )
    except InvalidQueryError as e:
        logger.error(str(e))
        sys.exit(1)
    print(text)


def info(docs_root: str | None = None) -> None:
    """Show information about the loaded corpus."""
    engine = _load_engine(docs_root)
    documents = engine.documents
    sections = Counter(doc.section for doc in documents)

    print(f"Corpus: {resolve_docs_root(docs_root)}")
    print(f"")
    print(f"Contents:")
    print(f"  Documents: {len(documents)}")
    print(f"  RPC methods: {sum(1 for d in documents if d.is_rpc_method)}")
    print(f"  Overviews: {sum(1 for d in documents if d.is_comprehensive_doc)}")
    print(f"")
    print(f"Sections:")
    for name, count in sorted(sections.items()):
        print(f"  {name}: {count}")


def deck(docs_root: str | None = None) -> None:
    """Launch the search console TUI for interactive query testing."""
    from lightdocs.console import main as console_main

    console_main(resolve_docs_root(docs_root))


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="lightdocs",
        description="Light MCP - ZK Compression Documentation Search",
    )
    subparsers = parser.add_subparsers(dest="command")

    def add_docs_root(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--docs-root",
            default=None,
            help="Markdown corpus folder (default: $LIGHTDOCS_DOCS_ROOT or ./compression-docs)",
        )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the MCP server (the default when no command is given)",
    )
    add_docs_root(serve_parser)
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    serve_parser.add_argument("--host", default=DEFAULT_HOST, help=f"Bind address (default: {DEFAULT_HOST})")
    serve_parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port (default: {DEFAULT_PORT})")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Run one query and print the results",
    )
    search_parser.add_argument("query", help="Search query")
    add_docs_root(search_parser)
    search_parser.add_argument("-n", "--limit", type=int, default=5, help="Maximum results (default: 5)")
    search_parser.add_argument("--section", default=None, help="Only search sections containing this text")
    search_parser.add_argument("--mode", choices=SEARCH_MODES, default="semantic", help="Search mode label")
    search_parser.add_argument(
        "--filter",
        dest="content_filter",
        choices=CONTENT_FILTERS,
        default="all",
        help="Content type filter (default: all)",
    )
    search_parser.add_argument("--no-code", action="store_true", help="Drop code blocks from excerpts")
    search_parser.add_argument("--no-context", action="store_true", help="Drop lines around matches")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about the documentation corpus",
    )
    add_docs_root(info_parser)

    # install / uninstall commands
    for name, help_text in (
        ("install", "Install Light MCP in Cursor"),
        ("uninstall", "Remove Light MCP from Cursor"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--config",
            default=None,
            help=f"MCP config file (default: {installer.CURSOR_CONFIG_PATH})",
        )

    # deck command
    deck_parser = subparsers.add_parser(
        "deck",
        help="Launch the search console TUI",
    )
    add_docs_root(deck_parser)

    args = parser.parse_args()

    # No command = run MCP server (this is what the editor calls)
    if args.command is None:
        serve()
    elif args.command == "serve":
        serve(args.docs_root, args.transport, args.host, args.port)
    elif args.command == "search":
        search(
            args.query,
            docs_root=args.docs_root,
            limit=args.limit,
            section=args.section,
            mode=args.mode,
            content_filter=args.content_filter,
            expand_context=not args.no_context,
            include_code=not args.no_code,
        )
    elif args.command == "info":
        info(args.docs_root)
    elif args.command == "install":
        installer.install(Path(args.config) if args.config else None)
    elif args.command == "uninstall":
        installer.uninstall(Path(args.config) if args.config else None)
    elif args.command == "deck":
        deck(args.docs_root)


if __name__ == "__main__":
    main()
