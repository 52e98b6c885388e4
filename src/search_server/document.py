"""Documents, their lifecycle status, and document predicates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


# (document_id, status, rating) -> keep?
DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored for every indexed document."""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """
    A ranked search result.

    Attributes:
        id: Caller-assigned document id.
        relevance: TF-IDF relevance of the document for the query.
        rating: Average rating computed when the document was added.
    """

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Predicate accepting documents whose status equals ``status``."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


def as_predicate(document_filter: DocumentStatus | DocumentPredicate) -> DocumentPredicate:
    """Turns a status into an equality predicate; predicates pass through."""
    if isinstance(document_filter, DocumentStatus):
        return status_predicate(document_filter)
    if not callable(document_filter):
        raise TypeError(
            f"expected DocumentStatus or predicate, got {type(document_filter).__name__}"
        )
    return document_filter
