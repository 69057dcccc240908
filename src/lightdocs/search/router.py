"""Query intent detection and result routing.

A query that asks for everything in a category ("list all rpc methods")
bypasses the fuzzy index and returns the whole category unranked.
"""

import re
from typing import Iterable, Optional

from lightdocs.classifiers import REFERENCE_FOLDER
from lightdocs.models import DocumentEntry, QueryIntent, SearchHit

COMPREHENSIVE_MARKERS = ("all", "list", "complete", "every", "entire", "full list")

CATEGORY_RPC = "rpc-methods"
CATEGORY_TOKENS = "compressed-tokens"
CATEGORY_ACCOUNTS = "compressed-pdas"

# First match wins
CATEGORY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("rpc", "method", "api"), CATEGORY_RPC),
    (("token",), CATEGORY_TOKENS),
    (("pda", "account"), CATEGORY_ACCOUNTS),
)

CONTENT_FILTERS = ("all", "guides", "reference", "examples", "concepts")

MAX_RESULTS = 20
COMPREHENSIVE_MIN_RESULTS = 25
MIN_TERM_LENGTH = 3

_MARKER_WORDS = re.compile(r"\b(all|list|complete|every|entire|full)\b")


def detect_query_intent(query: str) -> QueryIntent:
    """Classify a raw query as comprehensive or not, and by category."""
    query_lower = query.lower()
    is_comprehensive = any(marker in query_lower for marker in COMPREHENSIVE_MARKERS)

    category = None
    for needles, name in CATEGORY_RULES:
        if any(needle in query_lower for needle in needles):
            category = name
            break

    stripped = _MARKER_WORDS.sub("", query_lower)
    search_terms = [term for term in stripped.split() if len(term) >= MIN_TERM_LENGTH]

    return QueryIntent(
        is_comprehensive=is_comprehensive,
        category=category,
        search_terms=search_terms,
    )


def _normalize_section(value: str) -> str:
    return value.lower().replace("-", " ")


def _section_matches(document: DocumentEntry, section: Optional[str]) -> bool:
    # Folder names ("compressed-tokens") match derived sections ("compressed tokens")
    return not section or _normalize_section(section) in _normalize_section(document.section)


def select_comprehensive(
    documents: Iterable[DocumentEntry],
    category: str,
    section: Optional[str] = None,
) -> list[SearchHit]:
    """Every document in a category, each scored as a perfect match."""
    if category == CATEGORY_RPC:
        selected = [
            doc
            for doc in documents
            if doc.is_rpc_method or (doc.is_comprehensive_doc and REFERENCE_FOLDER in doc.path)
        ]
        selected.sort(key=lambda d: (not d.is_comprehensive_doc, d.title.lower(), d.relative_path))
    else:
        selected = [doc for doc in documents if _section_matches(doc, section)]

    return [SearchHit(document=doc, score=0.0) for doc in selected]


def filter_by_section(hits: Iterable[SearchHit], section: Optional[str]) -> list[SearchHit]:
    """Keep hits whose section contains ``section``, ignoring case and hyphens."""
    return [hit for hit in hits if _section_matches(hit.document, section)]


def _matches_content_filter(document: DocumentEntry, content_filter: str) -> bool:
    if content_filter == "guides":
        return "guides" in document.section or "guide" in document.title.lower()
    if content_filter == "reference":
        return document.is_rpc_method or "reference" in document.section
    if content_filter == "examples":
        return "example" in document.content or "```" in document.content
    if content_filter == "concepts":
        return "learn" in document.section or "concepts" in document.section
    return True


def apply_content_filter(hits: Iterable[SearchHit], content_filter: str = "all") -> list[SearchHit]:
    """Keep hits of the requested content type; ``all`` keeps everything."""
    if content_filter == "all":
        return list(hits)
    return [hit for hit in hits if _matches_content_filter(hit.document, content_filter)]


def clamp_limit(limit: int, category: Optional[str] = None, comprehensive: bool = False) -> int:
    """Clamp the caller's limit to [1, 20], or raise it to 25 for a full method listing."""
    limit = max(1, min(int(limit), MAX_RESULTS))
    if comprehensive and category == CATEGORY_RPC:
        limit = max(limit, COMPREHENSIVE_MIN_RESULTS)
    return limit
