"""Search index backends."""

from lightdocs.indexes.fuzzy_index import FIELD_WEIGHTS, FuzzyIndex

__all__ = ["FuzzyIndex", "FIELD_WEIGHTS"]
