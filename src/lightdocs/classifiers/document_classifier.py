"""Heuristic metadata for loaded documents.

Every rule is a plain function of the path, filename, title and body so it
can be tested on literal strings without building an index.
"""

import logging
import re
from typing import Any, Iterable, Optional

from lightdocs.models import DocumentEntry, RawDocument

logger = logging.getLogger(__name__)

FALLBACK_SECTION = "General"

# Folder holding one document per JSON-RPC method
REFERENCE_FOLDER = "json-rpc-methods"

# Filename token of the page listing every method
LISTING_TOKEN = "rpcmethods"

OVERVIEW_MARKER = "## Mainnet ZK Compression API endpoints"

DOMAIN_TERMS = (
    "rpc",
    "method",
    "api",
    "endpoint",
    "compressed",
    "account",
    "token",
    "balance",
    "signature",
)

MIN_KEYWORD_LENGTH = 3

_HEADING_METHOD = re.compile(r"^#\s*(\w+)$", re.MULTILINE)
_BACKTICK_METHOD = re.compile(r"`(\w+)`.*method", re.IGNORECASE)
_INLINE_CODE = re.compile(r"`([a-zA-Z][a-zA-Z0-9_]*)`")
_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


def _stem(filename: str) -> str:
    return filename[:-3] if filename.lower().endswith(".md") else filename


def derive_section(relative_path: str) -> str:
    """Coarse category from the first directory under the docs root."""
    parts = [part for part in relative_path.split("/") if part]
    if len(parts) < 2:
        return FALLBACK_SECTION
    return parts[0].replace("-", " ").strip() or FALLBACK_SECTION


def derive_title(relative_path: str, frontmatter: dict[str, Any]) -> str:
    """Front matter title, else the filename with hyphens as spaces."""
    title = frontmatter.get("title")
    title = str(title).strip() if title is not None else ""
    if not title:
        filename = relative_path.rsplit("/", 1)[-1]
        title = _stem(filename).replace("-", " ").strip()
    return title[:1].upper() + title[1:]


def extract_method_name(filename: str, body: str) -> Optional[str]:
    """Detect the API method a reference document describes."""
    stem = _stem(filename)
    if stem.startswith("get"):
        return stem

    match = _HEADING_METHOD.search(body) or _BACKTICK_METHOD.search(body)
    if match:
        return match.group(1)
    return None


def _long_words(words: Iterable[str]) -> set[str]:
    return {word for word in words if len(word) >= MIN_KEYWORD_LENGTH}


def extract_keywords(body: str, title: str, method_name: Optional[str] = None) -> frozenset[str]:
    """Collect lowercase search keywords for a document."""
    keywords = _long_words(title.lower().split())

    if method_name:
        keywords.update(_long_words([method_name.lower()]))
        camel_split = _CAMEL_BOUNDARY.sub(r" \1", method_name).lower()
        keywords.update(_long_words(camel_split.split()))

    keywords.update(_long_words(term.lower() for term in _INLINE_CODE.findall(body)))

    body_lower = body.lower()
    keywords.update(term for term in DOMAIN_TERMS if term in body_lower)

    return frozenset(keywords)


def is_rpc_method(path: str, filename: str) -> bool:
    """True for a single-method page inside the reference folder."""
    stem = _stem(filename).lower()
    return REFERENCE_FOLDER in path and "readme" not in stem and LISTING_TOKEN not in stem


def is_comprehensive_doc(filename: str, body: str, title: str) -> bool:
    """True for overview and listing pages covering many topics at once."""
    title_lower = title.lower()
    return (
        LISTING_TOKEN in _stem(filename)
        or OVERVIEW_MARKER in body
        or "overview" in title_lower
        or "all" in title_lower
    )


def classify(raw: RawDocument) -> DocumentEntry:
    """Derive a DocumentEntry from a raw document.

    Raises:
        ValueError: If the document has no body text
    """
    if not raw.body.strip():
        raise ValueError("document body is empty")

    filename = raw.relative_path.rsplit("/", 1)[-1]
    title = derive_title(raw.relative_path, raw.frontmatter)
    method_name = extract_method_name(filename, raw.body)

    return DocumentEntry(
        path=raw.path,
        relative_path=raw.relative_path,
        title=title,
        content=raw.body,
        frontmatter=dict(raw.frontmatter),
        section=derive_section(raw.relative_path),
        method_name=method_name,
        keywords=extract_keywords(raw.body, title, method_name),
        is_rpc_method=is_rpc_method(raw.path, filename),
        is_comprehensive_doc=is_comprehensive_doc(filename, raw.body, title),
    )


def classify_documents(raws: Iterable[RawDocument]) -> list[DocumentEntry]:
    """Classify a batch, skipping any document whose derivation fails."""
    documents = []
    for raw in raws:
        try:
            documents.append(classify(raw))
        except Exception as e:
            logger.error(f"Error processing {raw.path}: {e}")
    return documents
