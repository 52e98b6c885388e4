"""Bounded log of recent search requests."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from search_server.document import Document, DocumentPredicate, DocumentStatus
from search_server.exceptions import InvalidArgumentError
from search_server.parameters import Parameters
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    request: str
    found_docs: int


class RequestQueue:
    """
    Wraps a SearchServer and remembers the last Parameters.requests_window
    requests together with how many documents each one found.
    """

    def __init__(self, search_server: SearchServer):
        self._search_server = search_server
        self._requests: deque[QueryResult] = deque()

    def add_find_request(
        self,
        raw_query: str,
        document_filter: DocumentStatus | DocumentPredicate = DocumentStatus.ACTUAL,
    ) -> list[Document]:
        """Runs find_top_documents and records the request; results are returned as is."""
        try:
            documents = self._search_server.find_top_documents(raw_query, document_filter)
        except InvalidArgumentError as exc:
            logger.warning("Rejected request %r: %s", raw_query, exc)
            raise
        if len(self._requests) >= Parameters.requests_window:
            self._requests.popleft()
        self._requests.append(QueryResult(raw_query, len(documents)))
        return documents

    def get_no_result_requests(self) -> int:
        return sum(1 for request in self._requests if request.found_docs == 0)

    def __len__(self) -> int:
        return len(self._requests)
