"""
Authority table: url -> non-negative integer score (indegree in the link graph).

The table is supplied once, before any query runs, and never changes afterwards.
Urls missing from the table have authority 0.
"""

import json
from pathlib import Path
from types import MappingProxyType
from collections.abc import Iterable, Iterator, Mapping


class AuthorityTable(Mapping[str, int]):
    """Immutable mapping from url to authority score."""

    def __init__(self, scores: Mapping[str, int] | None = None) -> None:
        table: dict[str, int] = {}
        for url, score in (scores or {}).items():
            table[url] = _check_score(url, score)
        self._scores = MappingProxyType(table)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, int]]) -> "AuthorityTable":
        """Build from (url, score) pairs. A repeated url keeps its last score."""
        return cls(dict(pairs))

    @classmethod
    def from_json(cls, path: Path) -> "AuthorityTable":
        """
        Load a table from a JSON file holding either an object {url: score}
        or a list of [url, score] pairs.
        """
        path = Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, dict):
            return cls(data)
        if isinstance(data, list):
            pairs = []
            for item in data:
                if not isinstance(item, (list, tuple)) or len(item) != 2:
                    raise ValueError(f"Expected [url, score] pairs in {path}, got {item!r}")
                pairs.append((item[0], item[1]))
            return cls.from_pairs(pairs)
        raise ValueError(f"Unsupported authority file layout in {path}")

    def authority(self, url: str) -> int:
        return self._scores.get(url, 0)

    def __getitem__(self, url: str) -> int:
        return self._scores[url]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return f"AuthorityTable({len(self._scores)} urls)"


def _check_score(url: str, score: object) -> int:
    # bool is an int subclass but never a meaningful indegree
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Authority for {url!r} must be an integer, got {score!r}")
    if score < 0:
        raise ValueError(f"Authority for {url!r} must be non-negative, got {score}")
    return score
