"""
Command-line search over a freshly built web index.

The index lives in memory only: it is built at startup, either from a
directory of pre-crawled pages or by fetching every url of the link graph,
and then queried until the user exits.

Usage:
    python -m webindex.search_cli --graph data/graph.json --data data/pages
    python -m webindex.search_cli --graph data/graph.json --fetch --config config.ini
    python -m webindex.search_cli --graph data/graph.json --data data/pages -q "fish AND NOT bike"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .authority import AuthorityTable
from .config import Config
from .fetcher import DocumentFetcher
from .index_builder import build_index_from_directory, build_index_from_urls
from .posting import InvertedIndex
from .query import QuerySyntaxError, RankedQueryEngine
from .utils import get_logger

logger = logging.getLogger(__name__)


def load_index(
    graph_path: Path,
    data_dir: Optional[Path],
    fetch: bool,
    config: Config,
) -> Tuple[InvertedIndex, AuthorityTable]:
    """Load the authority table and build the index from the chosen source."""
    authority = AuthorityTable.from_json(graph_path)
    if fetch:
        fetcher = DocumentFetcher(config)
        try:
            index, _ = build_index_from_urls(authority.keys(), fetcher)
        finally:
            fetcher.close()
    else:
        index, _ = build_index_from_directory(data_dir)
    return index, authority


def print_results(query: str, engine: RankedQueryEngine, top_k: int) -> None:
    try:
        results = engine.query(query)
    except QuerySyntaxError as e:
        print(f"Bad query: {e}")
        return
    if not results:
        print("No documents matched the query.")
        return
    print(f"Top {min(top_k, len(results))} of {len(results)} results:")
    for position, result in enumerate(results[:top_k], start=1):
        print(f"{position:2d}. rank={result.rank:<6d} {result.url}")


def run_search_loop(engine: RankedQueryEngine, top_k: int = 10) -> None:
    """
    Interactive command-line search loop.
    """
    print("Enter queries: w | w1 AND w2 | w1 OR w2 | w1 AND NOT w2. Empty line or Ctrl+C to exit.")
    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break
        print_results(raw_query, engine, top_k)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ranked boolean search over a web graph.")
    parser.add_argument(
        "--graph",
        type=Path,
        required=True,
        help="JSON file with url -> authority (indegree) scores.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--data",
        type=Path,
        help="Directory of pre-crawled .json pages ({\"url\", \"content\"}).",
    )
    source.add_argument(
        "--fetch",
        action="store_true",
        help="Fetch every url in the graph over the network.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="INI file with fetcher and logging settings.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of top results to show.",
    )
    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=None,
        help="Run this query and exit (repeatable).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = Config.from_file(args.config) if args.config else Config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not load config: {e}")
        return 1
    get_logger("search", log_dir=config.log_dir, level=config.log_level)

    if not args.graph.exists():
        print(f"Graph file not found: {args.graph}")
        return 1
    if args.data is not None and not args.data.is_dir():
        print(f"Data directory not found: {args.data}")
        return 1

    try:
        index, authority = load_index(args.graph, args.data, args.fetch, config)
    except ValueError as e:
        print(f"Could not load graph: {e}")
        return 1
    logger.info(f"Index ready: {len(index.documents())} documents, {len(index)} terms, {len(authority)} graph urls")

    engine = RankedQueryEngine(index, authority)
    if args.query:
        queries: List[str] = args.query
        for q in queries:
            print(f"query> {q}")
            print_results(q, engine, args.top)
        return 0

    run_search_loop(engine, top_k=args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
