"""Core data models for documents and search results."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class SourceFile:
    """A raw markdown file as read from a corpus source."""

    path: str
    relative_path: str
    text: str


@dataclass(frozen=True)
class RawDocument:
    """A source file with its front matter split from the body."""

    path: str
    relative_path: str
    frontmatter: dict[str, Any] = field(hash=False, compare=False)
    body: str = ""


@dataclass(frozen=True)
class DocumentEntry:
    """A loaded and classified document. Never mutated after load."""

    path: str
    relative_path: str
    title: str
    content: str
    frontmatter: dict[str, Any] = field(hash=False, compare=False)
    section: str = "General"
    method_name: Optional[str] = None
    keywords: frozenset[str] = frozenset()
    is_rpc_method: bool = False
    is_comprehensive_doc: bool = False


@dataclass(frozen=True)
class SearchHit:
    """A document matched by the index. Lower score is better, 0 is perfect."""

    document: DocumentEntry
    score: float


@dataclass(frozen=True)
class QueryIntent:
    """What the router detected in a raw query string."""

    is_comprehensive: bool
    category: Optional[str]
    search_terms: list[str] = field(default_factory=list, hash=False)


@dataclass(frozen=True)
class SearchResult:
    """A hit paired with the excerpt shown to the caller."""

    document: DocumentEntry
    score: float
    excerpt: str

    @property
    def relevance(self) -> int:
        """Relevance percentage, 100 for a perfect match."""
        return round((1 - self.score) * 100)


@dataclass
class SearchOutcome:
    """Everything the formatter needs to render one search_docs call."""

    query: str
    mode: str
    content_filter: str
    section: Optional[str] = None
    used_comprehensive: bool = False
    results: list[SearchResult] = field(default_factory=list)
