"""Excerpt extraction for search results."""

from lightdocs.excerpts.paragraph_excerpter import ParagraphExcerpter
from lightdocs.excerpts.structured_excerpter import StructuredExcerpter
from lightdocs.models import DocumentEntry
from lightdocs.protocols import Excerpter

EXCERPT_BUDGET = 2000
TRUNCATION_MARKER = "\n\n..."
NO_CONTENT_PLACEHOLDER = "No relevant content found."

_PARAGRAPHS = ParagraphExcerpter()
_STRUCTURED = StructuredExcerpter()


def get_excerpter(document: DocumentEntry) -> Excerpter:
    """Reference and overview pages keep their structure; others use paragraphs."""
    if document.is_rpc_method or document.is_comprehensive_doc:
        return _STRUCTURED
    return _PARAGRAPHS


def truncate_excerpt(text: str, budget: int = EXCERPT_BUDGET) -> str:
    """Trim whitespace and cut to ``budget`` characters, marker included."""
    text = text.strip()
    if len(text) > budget:
        text = text[: budget - len(TRUNCATION_MARKER)].rstrip() + TRUNCATION_MARKER
    return text


def extract_excerpt(
    document: DocumentEntry,
    terms: list[str],
    include_code: bool = True,
    expand_context: bool = True,
    budget: int = EXCERPT_BUDGET,
) -> str:
    """Pick the query-relevant part of a document for display.

    Args:
        document: The matched document
        terms: Lowercase query terms
        include_code: Keep fenced code blocks in structured excerpts
        expand_context: Keep the neighbours of matching lines
        budget: Maximum excerpt length in characters

    Returns:
        The excerpt, or a placeholder when nothing relevant is left
    """
    raw = get_excerpter(document).extract(document, terms, include_code, expand_context)
    return truncate_excerpt(raw, budget) or NO_CONTENT_PLACEHOLDER


__all__ = [
    "EXCERPT_BUDGET",
    "NO_CONTENT_PLACEHOLDER",
    "TRUNCATION_MARKER",
    "ParagraphExcerpter",
    "StructuredExcerpter",
    "extract_excerpt",
    "get_excerpter",
    "truncate_excerpt",
]
