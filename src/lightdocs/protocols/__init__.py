"""Protocol definitions for extensible components."""

from lightdocs.protocols.excerpter import Excerpter
from lightdocs.protocols.search_index import SearchIndex
from lightdocs.protocols.source import CorpusSource

__all__ = ["CorpusSource", "SearchIndex", "Excerpter"]
