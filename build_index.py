"""
Build the in-memory web index and print analytics about it.

Usage:
    python build_index.py --graph data/graph.json --data data/pages
    python build_index.py --graph data/graph.json --fetch --config config.ini

Output:
  - Analytics table printed to console (documents, terms, postings, graph coverage)
"""

import argparse
import sys
from pathlib import Path

from webindex.config import Config
from webindex.search_cli import load_index
from webindex.utils import get_logger


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the web index and report analytics")
    parser.add_argument(
        "--graph",
        type=Path,
        default=Path("data/graph.json"),
        help="JSON file with url -> authority scores (default: data/graph.json)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Directory of pre-crawled .json pages (default: data/pages)",
    )
    parser.add_argument(
        "--fetch",
        action="store_true",
        help="Fetch the graph's urls instead of reading --data",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="INI file with fetcher settings",
    )
    args = parser.parse_args(argv)

    data_dir = args.data or Path("data/pages")
    if not args.graph.exists():
        print(f"No graph file found at {args.graph}.")
        return 1
    if not args.fetch and not data_dir.is_dir():
        print(f"No data folder found at {data_dir}.")
        return 1

    try:
        config = Config.from_file(args.config) if args.config else Config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Could not load config: {e}")
        return 1
    get_logger("build_index", log_dir=config.log_dir, level=config.log_level)

    try:
        index, authority = load_index(args.graph, data_dir, args.fetch, config)
    except ValueError as e:
        print(f"Could not load graph: {e}")
        return 1

    documents = index.documents()
    if not documents:
        print("No documents were indexed.")
        return 1
    missing_authority = sorted(url for url in documents if authority.authority(url) == 0)

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                          | Value |")
    print("|---------------------------------|-------|")
    print(f"| Number of indexed documents     | {len(documents)} |")
    print(f"| Number of unique terms          | {len(index)} |")
    print(f"| Number of postings              | {index.num_postings()} |")
    print(f"| Urls in graph                   | {len(authority)} |")
    print(f"| Indexed docs with zero authority| {len(missing_authority)} |")
    print()
    print("=" * 50)
    for url in missing_authority:
        print(f"  never ranked (authority 0): {url}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
