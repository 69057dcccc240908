"""Corpus source for an in-process table of markdown documents."""

import logging
from collections.abc import Mapping
from typing import Iterator

from lightdocs.models import SourceFile

logger = logging.getLogger(__name__)


class MemorySource:
    """Reads a fixed ``path -> raw text`` table in its own order."""

    source_type = "memory"

    def can_handle(self, source: object) -> bool:
        """Check if this is a mapping of paths to text."""
        return isinstance(source, Mapping)

    def read(self, source: Mapping[str, str]) -> Iterator[SourceFile]:
        logger.info(f"Found {len(source)} markdown files")
        for path, text in source.items():
            if not isinstance(text, str):
                logger.error(f"Error reading {path}: expected text, got {type(text).__name__}")
                continue
            path = str(path).lstrip("/")
            yield SourceFile(path=path, relative_path=path, text=text)
