"""The search engine behind the search_docs tool."""

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from lightdocs.classifiers import classify_documents
from lightdocs.excerpts import extract_excerpt
from lightdocs.indexes import FuzzyIndex
from lightdocs.models import DocumentEntry, SearchOutcome, SearchResult
from lightdocs.protocols import SearchIndex
from lightdocs.search.formatter import format_outcome
from lightdocs.search.router import (
    CONTENT_FILTERS,
    apply_content_filter,
    clamp_limit,
    detect_query_intent,
    filter_by_section,
    select_comprehensive,
)
from lightdocs.sources import load_documents

logger = logging.getLogger(__name__)

SEARCH_MODES = ("fuzzy", "exact", "semantic", "comprehensive")

NOT_READY_MESSAGE = "Search index not initialized. Please wait for the server to finish loading."


class InvalidQueryError(ValueError):
    """Raised for search_docs arguments that cannot be served."""


class DocsSearchEngine:
    """Loads a corpus once and answers queries against it.

    The document list and index are built exactly once and never mutated
    afterwards, so concurrent readers need no locking. Queries that arrive
    before loading finishes get a not-ready message instead of results.
    """

    def __init__(self, source: Path | str | Mapping[str, str]):
        """Initialize the engine.

        Args:
            source: A docs folder or a mapping of paths to markdown text
        """
        self.source = source
        self._documents: tuple[DocumentEntry, ...] = ()
        self._index: Optional[SearchIndex] = None
        self._load_lock = threading.Lock()
        self._ready = threading.Event()

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    @property
    def documents(self) -> tuple[DocumentEntry, ...]:
        return self._documents

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        return self._ready.wait(timeout)

    def load(self) -> None:
        """Load, classify and index the corpus. Later calls are no-ops."""
        with self._load_lock:
            if self.is_ready:
                return
            try:
                documents = tuple(classify_documents(load_documents(self.source)))
                index = FuzzyIndex(documents)
            except Exception:
                logger.exception("Error initializing documents")
                raise
            self._documents = documents
            self._index = index
            self._ready.set()

    def start_loading(self) -> threading.Thread:
        """Load the corpus in a background thread."""
        thread = threading.Thread(target=self.load, name="lightdocs-loader", daemon=True)
        thread.start()
        return thread

    def run_query(
        self,
        query: str,
        limit: int = 5,
        section: Optional[str] = None,
        mode: str = "semantic",
        content_filter: str = "all",
        expand_context: bool = True,
        include_code: bool = True,
    ) -> Optional[SearchOutcome]:
        """Route a query and build excerpts for the top results.

        Returns:
            The outcome, or None when the index is not ready yet

        Raises:
            InvalidQueryError: On an empty query, a non-integer limit or unknown mode/filter
        """
        if not query or not query.strip():
            raise InvalidQueryError("Query parameter is required")
        if mode not in SEARCH_MODES:
            raise InvalidQueryError(f"Unknown mode: {mode}. Expected one of {', '.join(SEARCH_MODES)}")
        if content_filter not in CONTENT_FILTERS:
            raise InvalidQueryError(
                f"Unknown content_filter: {content_filter}. Expected one of {', '.join(CONTENT_FILTERS)}"
            )
        try:
            limit = int(limit)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidQueryError(f"Invalid limit: {limit!r}") from e
        if not self.is_ready or self._index is None:
            return None

        intent = detect_query_intent(query)
        outcome = SearchOutcome(
            query=query,
            mode=mode,
            content_filter=content_filter,
            section=section,
        )

        if intent.is_comprehensive and intent.category:
            hits = select_comprehensive(self._documents, intent.category, section)
            outcome.used_comprehensive = True
            terms = intent.search_terms
        else:
            hits = self._index.search(query)
            hits = filter_by_section(hits, section)
            hits = apply_content_filter(hits, content_filter)
            terms = query.lower().split()

        limit = clamp_limit(limit, intent.category, outcome.used_comprehensive)
        logger.debug(f"Query {query!r}: {len(hits)} hits, showing {min(limit, len(hits))}")

        for hit in hits[:limit]:
            excerpt = extract_excerpt(hit.document, terms, include_code, expand_context)
            outcome.results.append(SearchResult(document=hit.document, score=hit.score, excerpt=excerpt))

        return outcome

    def search(self, query: str, **options) -> str:
        """Run a query and render it as text for the search_docs tool."""
        outcome = self.run_query(query, **options)
        if outcome is None:
            return NOT_READY_MESSAGE
        return format_outcome(outcome)
