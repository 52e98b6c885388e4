"""Whitespace tokenization and control-character validation."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from search_server.exceptions import InvalidArgumentError

_WORD_RE = re.compile(r"\S+")


def is_valid_word(text: str) -> bool:
    """A word (or whole text) is valid when it contains no character below 0x20."""
    return not any(ord(c) < 0x20 for c in text)


def check_valid_text(text: str) -> None:
    if not is_valid_word(text):
        raise InvalidArgumentError("control character in text")


def iter_words(text: str) -> Iterator[str]:
    """
    Lazily yields the whitespace-delimited terms of ``text``.

    Any Unicode whitespace separates terms, including characters that pass
    the control-character check such as U+0085 and U+00A0.
    """
    for match in _WORD_RE.finditer(text):
        yield match.group()


def split_into_words(text: str) -> list[str]:
    """Splits the input text into a list of whitespace-delimited terms."""
    return list(iter_words(text))


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """
    Collects stop words into a set.

    Empty strings are skipped; a string with a control character raises
    InvalidArgumentError.
    """
    result = set()
    for s in strings:
        check_valid_text(s)
        if s:
            result.add(s)
    return result
