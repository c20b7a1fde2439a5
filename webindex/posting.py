"""
Inverted index and ranked result data structures.

The index maps a term to the documents (urls) it occurs in, together with the
raw number of occurrences in each document. A term with no documents is never
stored, and a (term, url) pair is only stored once its count is positive.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping


_EMPTY: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True)
class RankedResult:
    """
    A document returned by a query.
    - url: document identifier
    - rank: positive integer score (occurrences x authority)
    """

    url: str
    rank: int

    def __repr__(self) -> str:
        return f"RankedResult(url={self.url!r}, rank={self.rank})"


class InvertedIndex:
    """
    Inverted index: map from term -> {url -> occurrence count}.

    Built by one writer through record(); once handed to a query engine it is
    only read. No locking is done here, callers serialize writes.
    """

    def __init__(self) -> None:
        self._index: dict[str, dict[str, int]] = {}

    def record(self, term: str, url: str) -> None:
        """Count one more occurrence of term in the document at url."""
        docs = self._index.get(term)
        if docs is None:
            docs = self._index[term] = {}
        docs[url] = docs.get(url, 0) + 1

    def record_tokens(self, tokens: Iterable[str], url: str) -> int:
        """Record every token of a document's token stream. Returns how many were recorded."""
        n = 0
        for token in tokens:
            self.record(token, url)
            n += 1
        return n

    def postings(self, term: str) -> Mapping[str, int]:
        """Return a read-only {url: count} view for a term, or an empty mapping."""
        docs = self._index.get(term)
        if docs is None:
            return _EMPTY
        return MappingProxyType(docs)

    def terms(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._index)

    def documents(self) -> set[str]:
        """Return the set of urls that contributed at least one posting."""
        urls: set[str] = set()
        for docs in self._index.values():
            urls.update(docs)
        return urls

    def num_postings(self) -> int:
        return sum(len(docs) for docs in self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Plain-dict snapshot, sorted by term, for reporting."""
        return {term: dict(sorted(self._index[term].items())) for term in sorted(self._index)}
