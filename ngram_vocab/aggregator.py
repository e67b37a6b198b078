"""
Vocabulary aggregation.

This module keeps the running term -> occurrence count mapping for a run and
merges per-file counts into it.
"""

from collections import Counter
from typing import Dict, Iterable, Mapping, Union


class VocabularyAggregator:
    """Accumulates term occurrence counts."""

    def __init__(self, config=None):
        """Initialize with configuration."""
        self.config = config
        self._counts: Counter = Counter()

    def increment(self, term: str) -> None:
        """Count one occurrence of a term (first observation starts at 1)."""
        self._counts[term] += 1

    def update(self, terms: Iterable[str]) -> None:
        """Count one occurrence of each term in order."""
        for term in terms:
            self.increment(term)

    def merge(self, other: Union["VocabularyAggregator", Mapping[str, int]]) -> None:
        """
        Add the counts of another aggregator or mapping to this one.

        Counting is commutative, so shards built independently (for example one
        per file) can be merged in any order with the same result.

        Args:
            other: Aggregator or term -> count mapping to fold in.
        """
        counts = other.counts() if isinstance(other, VocabularyAggregator) else other
        for term, count in counts.items():
            if count < 0:
                raise ValueError(f"negative count {count} for term {term!r}")
            if count:
                self._counts[term] += count

    def counts(self) -> Dict[str, int]:
        """Return a snapshot of the term -> count mapping."""
        return dict(self._counts)

    def total(self) -> int:
        """Return the total number of term occurrences."""
        return sum(self._counts.values())

    def __getitem__(self, term: str) -> int:
        return self._counts.get(term, 0)

    def __contains__(self, term: str) -> bool:
        return term in self._counts

    def __len__(self) -> int:
        return len(self._counts)
