"""Data models for lightdocs."""

from lightdocs.models.document import (
    DocumentEntry,
    QueryIntent,
    RawDocument,
    SearchHit,
    SearchOutcome,
    SearchResult,
    SourceFile,
)

__all__ = [
    "SourceFile",
    "RawDocument",
    "DocumentEntry",
    "SearchHit",
    "QueryIntent",
    "SearchResult",
    "SearchOutcome",
]
