"""
Query parsing.

A raw query is a whitespace-separated list of terms. A term prefixed with "-"
is a minus term: documents containing it are excluded from results. Stop
words are dropped from both sides.
"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

from search_server.exceptions import InvalidArgumentError
from search_server.tokenizer import check_valid_text, iter_words


@dataclass(frozen=True)
class QueryWord:
    data: str
    is_minus: bool = False
    is_stop: bool = False


@dataclass(frozen=True)
class Query:
    """Parsed query: disjoint sets of required (plus) and excluded (minus) terms."""

    plus_words: frozenset[str] = frozenset()
    minus_words: frozenset[str] = frozenset()


def parse_query_word(text: str, stop_words: Container[str]) -> QueryWord:
    if text == "-":
        raise InvalidArgumentError("dangling minus")
    if text.startswith("--"):
        raise InvalidArgumentError("double minus")
    is_minus = text.startswith("-")
    if is_minus:
        text = text[1:]
    return QueryWord(text, is_minus, text in stop_words)


def parse_query(text: str, stop_words: Container[str] = frozenset()) -> Query:
    """
    Parses a raw query string.

    Args:
        text: Raw query text.
        stop_words: Terms to drop from the query.

    Returns:
        Query with plus and minus terms. A term given both ways is kept only
        as a minus term.

    Raises:
        InvalidArgumentError: On control characters, a lone "-", or a term
            starting with "--".
    """
    check_valid_text(text)
    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for word in iter_words(text):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.data)
        else:
            plus_words.add(query_word.data)
    return Query(frozenset(plus_words - minus_words), frozenset(minus_words))
