"""Protocol for excerpt extraction strategies."""

from typing import Protocol, runtime_checkable

from lightdocs.models import DocumentEntry


@runtime_checkable
class Excerpter(Protocol):
    """Protocol for picking the part of a document shown in results.

    Different strategies are used for reference and narrative documents.
    """

    def extract(
        self,
        document: DocumentEntry,
        terms: list[str],
        include_code: bool,
        expand_context: bool,
    ) -> str:
        """Return the raw excerpt, before trimming and truncation."""
        ...
