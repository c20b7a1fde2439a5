import logging

import pytest

from webindex.authority import AuthorityTable
from webindex.posting import InvertedIndex
from webindex.query import RankedQueryEngine


def make_index(counts):
    """Build an index from {term: {url: count}} by repeated record() calls."""
    index = InvertedIndex()
    for term, docs in counts.items():
        for url, count in docs.items():
            for _ in range(count):
                index.record(term, url)
    return index


@pytest.fixture
def fish_engine():
    # fish: U1 x3 (authority 2), U2 x1 (authority 10); bike: U1 x2
    index = make_index({"fish": {"U1": 3, "U2": 1}, "bike": {"U1": 2}})
    return RankedQueryEngine(index, AuthorityTable({"U1": 2, "U2": 10}))


@pytest.fixture
def corpus_engine():
    index = make_index({
        "python": {"a.com": 4, "b.com": 1, "c.com": 2, "orphan.com": 5},
        "snake": {"b.com": 3, "c.com": 1, "d.com": 2, "zero.com": 7},
        "java": {"a.com": 1, "d.com": 6, "zero.com": 1},
        "coffee": {"d.com": 2},
    })
    authority = AuthorityTable({"a.com": 3, "b.com": 5, "c.com": 1, "d.com": 2, "zero.com": 0})
    return RankedQueryEngine(index, authority)


class FakeResponse:
    def __init__(self, status_code=200, text="", content_type="text/html; charset=utf-8"):
        self.status_code = status_code
        self.text = text
        self.headers = {"Content-Type": content_type} if content_type else {}


class FakeSession:
    """Stands in for requests.Session; maps url -> FakeResponse or exception."""

    def __init__(self, responses):
        self.responses = responses
        self.headers = {}
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None, allow_redirects=True):
        self.calls.append((url, timeout))
        outcome = self.responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("webindex")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
