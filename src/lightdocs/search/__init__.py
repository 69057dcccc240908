"""Query routing, search engine and result formatting."""

from lightdocs.search.engine import (
    NOT_READY_MESSAGE,
    SEARCH_MODES,
    DocsSearchEngine,
    InvalidQueryError,
)
from lightdocs.search.formatter import format_no_results, format_outcome
from lightdocs.search.router import CONTENT_FILTERS, detect_query_intent

__all__ = [
    "CONTENT_FILTERS",
    "NOT_READY_MESSAGE",
    "SEARCH_MODES",
    "DocsSearchEngine",
    "InvalidQueryError",
    "detect_query_intent",
    "format_no_results",
    "format_outcome",
]
