"""Weighted fuzzy search index backed by rapidfuzz."""

import logging
from dataclasses import dataclass
from typing import Iterable

from rapidfuzz import fuzz, process, utils

from lightdocs.models import DocumentEntry, SearchHit

logger = logging.getLogger(__name__)

# (field, weight); title matters most, section least
FIELD_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("title", 3.0),
    ("method_name", 2.5),
    ("keywords", 2.0),
    ("content", 1.0),
    ("section", 0.5),
)


@dataclass(frozen=True)
class _IndexedFields:
    """Pre-processed field values for one document."""

    document: DocumentEntry
    values: dict[str, tuple[str, ...]]


class FuzzyIndex:
    """Approximate, case-insensitive search over classified documents.

    Each field is scored with ``fuzz.partial_ratio`` per query term, so
    substrings and small misspellings still match. Field scores are combined
    as a weighted mean and turned into a distance: 0 is a perfect match, 1
    no match at all. Documents scoring worse than ``threshold`` are dropped.
    """

    DEFAULT_THRESHOLD = 0.6
    MIN_TERM_LENGTH = 2

    def __init__(self, documents: Iterable[DocumentEntry], threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold
        self._entries = tuple(self._prepare(doc) for doc in documents)
        logger.info(f"Initialized search index with {len(self._entries)} documents")

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _prepare(document: DocumentEntry) -> _IndexedFields:
        raw = {
            "title": (document.title,),
            "method_name": (document.method_name,) if document.method_name else (),
            "keywords": tuple(sorted(document.keywords)),
            "content": (document.content,),
            "section": (document.section,),
        }
        values = {
            name: tuple(v for v in (utils.default_process(item) for item in items) if v)
            for name, items in raw.items()
        }
        return _IndexedFields(document=document, values=values)

    def _terms(self, query: str) -> list[str]:
        return [t for t in utils.default_process(query).split() if len(t) >= self.MIN_TERM_LENGTH]

    @staticmethod
    def _field_similarity(terms: list[str], values: tuple[str, ...]) -> float:
        """Mean over terms of the best partial match against any value."""
        total = 0.0
        for term in terms:
            best = process.extractOne(term, values, scorer=fuzz.partial_ratio, processor=None)
            total += best[1] if best else 0.0
        return total / len(terms)

    def _score_entry(self, terms: list[str], entry: _IndexedFields) -> float:
        weighted = 0.0
        weight_total = 0.0
        for name, weight in FIELD_WEIGHTS:
            values = entry.values[name]
            # Absent fields neither help nor hurt
            if not values:
                continue
            weighted += weight * self._field_similarity(terms, values)
            weight_total += weight
        if weight_total == 0:
            return 1.0
        return round(1.0 - weighted / weight_total / 100.0, 6)

    def search(self, query: str) -> list[SearchHit]:
        """Return hits ranked by score, then title, then path."""
        terms = self._terms(query)
        if not terms:
            return []

        hits = []
        for entry in self._entries:
            score = self._score_entry(terms, entry)
            if score <= self.threshold:
                hits.append(SearchHit(document=entry.document, score=score))

        hits.sort(key=lambda h: (h.score, h.document.title.lower(), h.document.relative_path))
        return hits
