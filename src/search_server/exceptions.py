"""Error types raised by the search server."""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidArgumentError(SearchServerError, ValueError):
    """Malformed text or query, invalid stop words, or an invalid/duplicate document id."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """An operation referenced a document id that is not in the index."""

    def __init__(self, document_id: int):
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"document {self.document_id} not found"
