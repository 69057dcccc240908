"""Corpus source for a local documentation folder."""

import logging
from pathlib import Path
from typing import Iterator

from lightdocs.models import SourceFile

logger = logging.getLogger(__name__)


class FolderSource:
    """Reads every markdown file under a docs root."""

    source_type = "folder"
    pattern = "**/*.md"

    def can_handle(self, source: object) -> bool:
        """Check if this is an existing directory."""
        return isinstance(source, (str, Path)) and Path(source).is_dir()

    def read(self, source: Path | str) -> Iterator[SourceFile]:
        """Yield markdown files from a folder recursively.

        Args:
            source: Path to the docs root

        Yields:
            SourceFile objects sorted by relative path
        """
        root = Path(source)
        files = sorted(p for p in root.glob(self.pattern) if p.is_file())
        logger.info(f"Found {len(files)} markdown files")

        for full_path in files:
            rel_path = full_path.relative_to(root)

            # Skip hidden files and folders
            if any(part.startswith(".") for part in rel_path.parts):
                continue

            try:
                text = full_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error reading {full_path}: {e}")
                continue

            yield SourceFile(
                path=str(full_path.absolute()),
                relative_path=rel_path.as_posix(),
                text=text,
            )
