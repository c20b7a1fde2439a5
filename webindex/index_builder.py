"""
Index builder: feeds normalized page tokens into an InvertedIndex.

Ingestion is best-effort. A url whose page cannot be fetched or read is logged
and skipped, so it never contributes postings and every query treats it as
containing no terms.
"""

import json
import logging
from pathlib import Path
from typing import Iterable
from urllib.parse import urlparse

from .fetcher import DocumentFetcher, FetchError
from .posting import InvertedIndex
from .tokenizer import get_tokens_from_html


logger = logging.getLogger(__name__)


def _strip_fragment(url: str) -> str:
    """Remove URL fragment (#...) so a page is indexed under one url."""
    parsed = urlparse(url)
    if parsed.fragment:
        parsed = parsed._replace(fragment="")
    return parsed.geturl()


def _read_doc_content_and_url(filepath: Path) -> tuple[str, str]:
    """
    Read a pre-crawled document: a .json file with "url" and "content" keys.
    Returns (content, url with fragment stripped).
    """
    data = json.loads(Path(filepath).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"JSON document is not an object: {filepath}")
    if "content" not in data:
        raise ValueError(f"JSON file has no 'content' field: {filepath}")
    if not isinstance(data["content"], str):
        raise ValueError(f"JSON file 'content' is not a string: {filepath}")
    url = data.get("url")
    if not url:
        raise ValueError(f"JSON file has no 'url' field: {filepath}")
    if not isinstance(url, str):
        raise ValueError(f"JSON file 'url' is not a string: {filepath}")
    return data["content"], _strip_fragment(url)


def index_document(index: InvertedIndex, url: str, html_content: str) -> int:
    """Record every token of one page under url. Returns the token count."""
    return index.record_tokens(get_tokens_from_html(html_content), url)


def build_index_from_urls(
    urls: Iterable[str],
    fetcher: DocumentFetcher,
    index: InvertedIndex | None = None,
) -> tuple[InvertedIndex, list[str]]:
    """
    Fetch each url in order and index its page.
    Returns (index, urls that were indexed).
    """
    index = index if index is not None else InvertedIndex()
    indexed: list[str] = []
    failed = 0

    for url in urls:
        try:
            html = fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f"Skipping {url}: {e.reason}")
            failed += 1
            continue
        n_tokens = index_document(index, url, html)
        indexed.append(url)
        logger.debug(f"Indexed {url} ({n_tokens} tokens)")

    logger.info(f"Indexed {len(indexed)} pages ({failed} failed), {len(index)} terms")
    return index, indexed


def build_index_from_directory(
    data_dir: Path,
    index: InvertedIndex | None = None,
) -> tuple[InvertedIndex, list[str]]:
    """
    Build an index from a pre-crawled corpus: every .json file under data_dir
    (recursive) holding {"url": ..., "content": <html>}.
    Files are processed in path order. Returns (index, urls that were indexed).
    """
    index = index if index is not None else InvertedIndex()
    indexed: list[str] = []
    data_dir = Path(data_dir)

    for filepath in sorted(data_dir.rglob("*.json"), key=lambda p: str(p)):
        try:
            content, url = _read_doc_content_and_url(filepath)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {filepath}: {e}")
            continue
        index_document(index, url, content)
        indexed.append(url)

    logger.info(f"Indexed {len(indexed)} documents from {data_dir}, {len(index)} terms")
    return index, indexed
