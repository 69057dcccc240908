"""Protocol for corpus source handlers."""

from typing import Any, Iterator, Protocol, runtime_checkable

from lightdocs.models import SourceFile


@runtime_checkable
class CorpusSource(Protocol):
    """Protocol for corpus source handlers.

    Implementations read markdown from different places (a docs folder,
    an in-process table). Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'folder', 'memory')."""
        ...

    def can_handle(self, source: Any) -> bool:
        """Check if this source handler can read the given input."""
        ...

    def read(self, source: Any) -> Iterator[SourceFile]:
        """Yield raw markdown files in a stable order.

        Unreadable entries are logged and skipped, never raised.
        """
        ...
