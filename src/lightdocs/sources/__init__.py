"""Corpus sources and the document loader."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from lightdocs.models import RawDocument
from lightdocs.protocols import CorpusSource
from lightdocs.sources.folder_source import FolderSource
from lightdocs.sources.memory_source import MemorySource
from lightdocs.utils.frontmatter import FrontmatterError, parse_frontmatter

logger = logging.getLogger(__name__)

# Registry of available sources
_SOURCES: list[CorpusSource] = [
    MemorySource(),
    FolderSource(),
]


def get_source(source: Path | str | Mapping[str, str]) -> Optional[CorpusSource]:
    """Find a corpus source that can read the given input.

    Args:
        source: A docs folder or a mapping of paths to markdown text

    Returns:
        A CorpusSource instance that can handle the input, or None
    """
    for handler in _SOURCES:
        if handler.can_handle(source):
            return handler
    return None


def register_source(handler: CorpusSource) -> None:
    """Register a custom corpus source (for plugins/extensions).

    Args:
        handler: An object implementing the CorpusSource protocol
    """
    _SOURCES.append(handler)


def load_documents(source: Path | str | Mapping[str, str]) -> list[RawDocument]:
    """Read a corpus and split each document's front matter from its body.

    A document with malformed front matter is logged and skipped; the rest of
    the batch still loads. A missing docs folder yields an empty corpus.

    Args:
        source: A docs folder or a mapping of paths to markdown text

    Returns:
        RawDocument objects in source order, unique by path
    """
    handler = get_source(source)
    if handler is None:
        logger.warning(f"No corpus source can read: {source}")
        return []

    documents: list[RawDocument] = []
    seen: set[str] = set()
    for file in handler.read(source):
        if file.path in seen:
            logger.warning(f"Skipping duplicate document path: {file.path}")
            continue
        try:
            frontmatter, body = parse_frontmatter(file.text)
        except FrontmatterError as e:
            logger.error(f"Error processing {file.path}: {e}")
            continue

        seen.add(file.path)
        documents.append(
            RawDocument(
                path=file.path,
                relative_path=file.relative_path,
                frontmatter=frontmatter,
                body=body,
            )
        )

    return documents


__all__ = [
    "get_source",
    "register_source",
    "load_documents",
    "FolderSource",
    "MemorySource",
]
