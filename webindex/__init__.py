"""Ranked boolean web search package."""

from .posting import InvertedIndex, RankedResult
from .authority import AuthorityTable
from .query import RankedQueryEngine, QuerySyntaxError, parse_query
from .index_builder import build_index_from_directory, build_index_from_urls, index_document
from .tokenizer import normalize_tokens, get_tokens_from_html
