"""Protocol for search index backends."""

from typing import Protocol, runtime_checkable

from lightdocs.models import SearchHit


@runtime_checkable
class SearchIndex(Protocol):
    """Protocol for an index built once over the classified documents.

    Any approximate matcher fits as long as scores fall in [0, 1] with 0 as
    the best match and ties are broken deterministically.
    """

    def __len__(self) -> int:
        """Return the number of indexed documents."""
        ...

    def search(self, query: str) -> list[SearchHit]:
        """Return hits ranked best first."""
        ...
