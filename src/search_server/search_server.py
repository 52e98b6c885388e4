"""
In-memory TF-IDF search server.

Documents are whitespace-tokenized, stop words are dropped, and each
surviving term gets a term frequency of 1 / (surviving token count),
accumulated per occurrence. Two maps are kept in step:

    word -> {document_id -> tf}    (inverted index, used for ranking)
    document_id -> {word -> tf}    (reverse index, used for removal and introspection)

Ranking:
    idf(t) = ln(N / df(t))
    relevance(d) = sum over plus terms t in d of tf(d, t) * idf(t)

Documents containing any minus term are excluded. Results are sorted by
relevance descending; relevances within Parameters.relevance_epsilon are
ordered by rating descending.

Usage:
    from search_server import SearchServer, DocumentStatus

    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.find_top_documents("rat")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import cmp_to_key
from typing import TYPE_CHECKING

import numpy as np

from search_server.document import (
    Document,
    DocumentData,
    DocumentPredicate,
    DocumentStatus,
    as_predicate,
)
from search_server.exceptions import DocumentNotFoundError, InvalidArgumentError
from search_server.parameters import Parameters
from search_server.query import Query, parse_query
from search_server.tokenizer import (
    check_valid_text,
    make_unique_non_empty_strings,
    split_into_words,
)

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < Parameters.relevance_epsilon:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


class SearchServer:
    """
    Inverted index over short rated documents.

    Args:
        stop_words: Either a whitespace-separated string or an iterable of
            stop words. Empty words are ignored.

    Raises:
        InvalidArgumentError: If a stop word contains a control character.
    """

    def __init__(self, stop_words: str | Iterable[str] = ""):
        if isinstance(stop_words, str):
            check_valid_text(stop_words)
            stop_words = split_into_words(stop_words)
        self._stop_words: set[str] = make_unique_non_empty_strings(stop_words)
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}
        self._documents: dict[int, DocumentData] = {}

    # =========================================================================
    # Stop words
    # =========================================================================

    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_words)

    def set_stop_words(self, text: str) -> None:
        """Adds the whitespace-separated words of ``text`` to the stop words."""
        check_valid_text(text)
        self._stop_words |= make_unique_non_empty_strings(split_into_words(text))

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        check_valid_text(text)
        return [word for word in split_into_words(text) if not self.is_stop_word(word)]

    # =========================================================================
    # Ingestion and removal
    # =========================================================================

    @staticmethod
    def compute_average_rating(ratings: Sequence[int]) -> int:
        """Integer average of ``ratings``, truncated toward zero; 0 when empty."""
        # object dtype keeps Python ints, so large ratings cannot wrap around
        values = np.asarray([int(rating) for rating in ratings], dtype=object)
        if values.size == 0:
            return 0
        total = int(np.sum(values))
        count = int(values.size)
        if total < 0:
            return -(-total // count)
        return total // count

    def _check_new_document_id(self, document_id: int) -> None:
        if document_id < 0:
            raise InvalidArgumentError(f"invalid document id {document_id}")
        if document_id in self._documents:
            raise InvalidArgumentError(f"duplicate document id {document_id}")

    @staticmethod
    def _check_status(status: DocumentStatus) -> None:
        if not isinstance(status, DocumentStatus):
            raise InvalidArgumentError(f"invalid document status {status!r}")

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """
        Indexes a document.

        A document with no words left after stop-word removal is stored with
        an empty term map: it is counted but never matches a query.

        Raises:
            InvalidArgumentError: For a negative or already used id, a status
                that is not a DocumentStatus, or text containing control
                characters. The index is left unchanged.
        """
        self._check_new_document_id(document_id)
        self._check_status(status)
        words = self.split_into_words_no_stop(document)
        rating = self.compute_average_rating(ratings)

        word_freqs: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                word_freqs[word] = word_freqs.get(word, 0.0) + inv_word_count
                postings = self._word_to_document_freqs.setdefault(word, {})
                postings[document_id] = postings.get(document_id, 0.0) + inv_word_count

        self._document_to_word_freqs[document_id] = word_freqs
        self._documents[document_id] = DocumentData(rating, status)
        logger.debug(
            "Added document %d (%d terms, rating %d, %s)",
            document_id,
            len(word_freqs),
            rating,
            status.name,
        )

    def remove_document(self, document_id: int) -> None:
        """
        Removes a document from every structure of the index.

        Raises:
            DocumentNotFoundError: If the id is not indexed.
        """
        if document_id not in self._documents:
            raise DocumentNotFoundError(document_id)
        for word in self._document_to_word_freqs[document_id]:
            postings = self._word_to_document_freqs[word]
            del postings[document_id]
            if not postings:
                del self._word_to_document_freqs[word]
        del self._document_to_word_freqs[document_id]
        del self._documents[document_id]
        logger.debug("Removed document %d", document_id)

    # =========================================================================
    # Introspection
    # =========================================================================

    def get_document_count(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return self.get_document_count()

    def __iter__(self) -> Iterator[int]:
        """Document ids in ascending order."""
        return iter(sorted(self._documents))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def get_document_id(self, index: int) -> int:
        """The id at position ``index`` in ascending id order."""
        ids = sorted(self._documents)
        if not 0 <= index < len(ids):
            raise IndexError(f"document index {index} out of range")
        return ids[index]

    def get_document_data(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """
        Term frequencies of one document.

        Returns a new dict on every call.

        Raises:
            DocumentNotFoundError: If the id is not indexed.
        """
        if document_id not in self._document_to_word_freqs:
            raise DocumentNotFoundError(document_id)
        return dict(self._document_to_word_freqs[document_id])

    # =========================================================================
    # Ranking
    # =========================================================================

    def _inverse_document_freqs(self, words: list[str]) -> NDArray[np.float64]:
        document_count = self.get_document_count()
        df = np.array(
            [len(self._word_to_document_freqs.get(word, ())) for word in words],
            dtype=np.float64,
        )
        idf = np.zeros_like(df)
        if document_count == 0:
            return idf
        present = df > 0
        idf[present] = np.log(document_count / df[present])
        return idf

    def compute_word_inverse_document_freq(self, word: str) -> float:
        """ln(N / df(word)); 0.0 for unknown words or an empty index."""
        return float(self._inverse_document_freqs([word])[0])

    def find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[Document]:
        """Unsorted, untruncated matches of a parsed query, in id order."""
        words = sorted(w for w in query.plus_words if w in self._word_to_document_freqs)
        idf = self._inverse_document_freqs(words)

        document_to_relevance: dict[int, float] = {}
        for word, inverse_document_freq in zip(words, idf):
            for document_id, term_freq in self._word_to_document_freqs[word].items():
                data = self._documents[document_id]
                if predicate(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0)
                        + term_freq * float(inverse_document_freq)
                    )

        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, ()):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def find_top_documents(
        self,
        raw_query: str,
        document_filter: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """
        Top documents for a raw query.

        Args:
            raw_query: Query text; "-term" excludes documents containing term.
            document_filter: A status to match exactly, or a predicate
                ``(document_id, status, rating) -> bool``. Defaults to ACTUAL.

        Returns:
            At most Parameters.max_result_document_count documents, best first.

        Raises:
            InvalidArgumentError: If the query cannot be parsed.
        """
        query = parse_query(raw_query, self._stop_words)
        matched_documents = self.find_all_documents(query, as_predicate(document_filter))
        matched_documents.sort(key=cmp_to_key(_compare_documents))
        logger.debug("Query %r matched %d documents", raw_query, len(matched_documents))
        return matched_documents[: Parameters.max_result_document_count]

    # =========================================================================
    # Matching
    # =========================================================================

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus terms of ``raw_query`` present in one document.

        Returns:
            (matched words in sorted order, document status). The word list
            is empty if the document contains any minus term.

        Raises:
            InvalidArgumentError: If the query cannot be parsed.
            DocumentNotFoundError: If the id is not indexed.
        """
        query = parse_query(raw_query, self._stop_words)
        if document_id not in self._documents:
            raise DocumentNotFoundError(document_id)
        word_freqs = self._document_to_word_freqs[document_id]
        status = self._documents[document_id].status

        if any(word in word_freqs for word in query.minus_words):
            return [], status
        return sorted(word for word in query.plus_words if word in word_freqs), status
