"""
HTML text extraction and token normalization for the web index.

Page bodies are split on whitespace, each token is stripped of surrounding
punctuation and lowercased, and stop words are dropped. No stemming is done:
the index stores exactly the tokens produced here, and queries are normalized
with the same rules.
"""

import re
import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

_TOKENIZER = WhitespaceTokenizer()

_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")

STOP_WORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an",
    "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "down", "during", "each", "few", "for", "from",
    "further", "had", "has", "have", "having", "he", "her", "here", "hers",
    "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is",
    "it", "its", "itself", "just", "me", "more", "most", "my", "myself", "no",
    "nor", "not", "now", "of", "off", "on", "once", "only", "or", "other",
    "our", "ours", "ourselves", "out", "over", "own", "same", "she", "should",
    "so", "some", "such", "than", "that", "the", "their", "theirs", "them",
    "themselves", "then", "there", "these", "they", "this", "those",
    "through", "to", "too", "under", "until", "up", "very", "was", "we",
    "were", "what", "when", "where", "which", "while", "who", "whom", "why",
    "will", "with", "would", "you", "your", "yours", "yourself", "yourselves",
})


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible body text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style", "noscript"]):
        element.decompose()
    root = soup.body if soup.body is not None else soup
    return root.get_text(separator=" ", strip=True)


def strip_punctuation(token: str) -> str:
    """Remove leading and trailing punctuation and lowercase the token."""
    return _EDGE_PUNCTUATION.sub("", token).lower()


def is_stop_word(token: str) -> bool:
    # an all-punctuation token strips to "" and is never indexed
    return not token or token in STOP_WORDS


def normalize_token(token: str) -> str:
    """Normalize a single token; returns "" if it should not be indexed."""
    token = strip_punctuation(token)
    if is_stop_word(token):
        return ""
    return token


def normalize_tokens(text: str) -> list[str]:
    """
    Split text on whitespace and return the normalized, non-stop-word tokens
    in document order (duplicates kept, they are the occurrence counts).
    """
    if not text:
        return []
    tokens = (normalize_token(raw) for raw in _TOKENIZER.tokenize(text))
    return [t for t in tokens if t]


def get_tokens_from_html(html_content: str) -> list[str]:
    """
    Extract text from HTML and return its index tokens.
    """
    return normalize_tokens(extract_text_from_html(html_content))
