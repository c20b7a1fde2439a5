"""
Ranked boolean search over a sealed inverted index.

A document's rank for a single term is the number of times the term occurs in
it multiplied by the document's authority. AND and OR add the two single-term
ranks of a document; AND NOT keeps the first term's rank. Every operator drops
results whose rank is not positive and orders the rest by rank (highest first),
breaking ties by url so output is reproducible.

Supported query strings:
    fish
    fish AND bike
    fish OR bike
    fish AND NOT bike
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from .authority import AuthorityTable
from .posting import InvertedIndex, RankedResult
from .tokenizer import normalize_token

SINGLE = "TERM"
AND = "AND"
OR = "OR"
AND_NOT = "AND NOT"


class QuerySyntaxError(ValueError):
    """Raised for a query string that is not one of the supported shapes."""


@dataclass(frozen=True)
class ParsedQuery:
    operator: str
    terms: tuple[str, ...]


def _ordered(ranks: Mapping[str, int]) -> List[RankedResult]:
    """Drop non-positive ranks and sort by rank descending, then url ascending."""
    return [
        RankedResult(url, rank)
        for url, rank in sorted(ranks.items(), key=lambda x: (-x[1], x[0]))
        if rank > 0
    ]


def _as_ranks(results: List[RankedResult]) -> Dict[str, int]:
    return {r.url: r.rank for r in results}


def _combine(first: Dict[str, int], second: Dict[str, int], urls) -> Dict[str, int]:
    """Sum the two operands' ranks for each eligible url; a missing side counts 0."""
    return {url: first.get(url, 0) + second.get(url, 0) for url in urls}


class RankedQueryEngine:
    """
    Answers single-term and two-term boolean queries against an index.

    The engine never writes to the index or the authority table, so any number
    of threads may query one engine at the same time.
    """

    def __init__(
        self,
        index: InvertedIndex,
        authority: Optional[Mapping[str, int]] = None,
    ) -> None:
        self.index = index
        if isinstance(authority, AuthorityTable):
            self.authority = authority
        else:
            self.authority = AuthorityTable(authority)

    def score(self, url: str, raw_count: int) -> int:
        return raw_count * self.authority.authority(url)

    def search(self, term: str) -> List[RankedResult]:
        """Documents containing term, ranked by count x authority."""
        postings = self.index.postings(term)
        return _ordered({url: self.score(url, count) for url, count in postings.items()})

    def search_and(self, w1: str, w2: str) -> List[RankedResult]:
        """Documents ranked for both terms; rank is the sum of the two ranks."""
        first = _as_ranks(self.search(w1))
        second = _as_ranks(self.search(w2))
        return _ordered(_combine(first, second, first.keys() & second.keys()))

    def search_or(self, w1: str, w2: str) -> List[RankedResult]:
        """Documents ranked for either term; rank is the sum of the available ranks."""
        first = _as_ranks(self.search(w1))
        second = _as_ranks(self.search(w2))
        return _ordered(_combine(first, second, first.keys() | second.keys()))

    def search_and_not(self, w1: str, w2: str) -> List[RankedResult]:
        """
        Documents ranked for w1 that do not appear in the ranked results for w2.

        A document that contains w2 but has zero authority is absent from the
        w2 results, so it is not excluded here.
        """
        excluded = {r.url for r in self.search(w2)}
        return [r for r in self.search(w1) if r.url not in excluded]

    def run(self, parsed: ParsedQuery) -> List[RankedResult]:
        if parsed.operator == SINGLE:
            return self.search(parsed.terms[0])
        w1, w2 = parsed.terms
        if parsed.operator == AND:
            return self.search_and(w1, w2)
        if parsed.operator == OR:
            return self.search_or(w1, w2)
        if parsed.operator == AND_NOT:
            return self.search_and_not(w1, w2)
        raise QuerySyntaxError(f"Unknown operator: {parsed.operator!r}")

    def query(self, text: str) -> List[RankedResult]:
        """Parse a query string and run it."""
        return self.run(parse_query(text))


def _term(raw: str) -> str:
    term = normalize_token(raw)
    if not term:
        raise QuerySyntaxError(f"{raw!r} is not a searchable term (empty or a stop word)")
    return term


def parse_query(text: str) -> ParsedQuery:
    """
    Parse "w", "w1 AND w2", "w1 OR w2" or "w1 AND NOT w2".

    Operator keywords are case-insensitive. Terms are normalized with the same
    rules the indexer applies to page text.
    """
    words = text.split()
    upper = [w.upper() for w in words]
    if len(words) == 1:
        return ParsedQuery(SINGLE, (_term(words[0]),))
    if len(words) == 3 and upper[1] in (AND, OR):
        return ParsedQuery(upper[1], (_term(words[0]), _term(words[2])))
    if len(words) == 4 and upper[1] == AND and upper[2] == "NOT":
        return ParsedQuery(AND_NOT, (_term(words[0]), _term(words[3])))
    if not words:
        raise QuerySyntaxError("Empty query.")
    raise QuerySyntaxError(
        f"Unsupported query {text!r}; use 'w', 'w1 AND w2', 'w1 OR w2' or 'w1 AND NOT w2'."
    )
