"""Removal of documents that share exactly the same vocabulary."""

from __future__ import annotations

import logging

from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


def remove_duplicates(search_server: SearchServer) -> list[int]:
    """
    Removes every document whose set of distinct terms was already seen.

    Documents are scanned in ascending id order, so among duplicates the
    lowest id survives. Term frequencies and word order are ignored.

    Returns:
        The removed document ids, ascending.
    """
    first_seen: dict[frozenset[str], int] = {}
    to_remove: list[int] = []
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in first_seen:
            to_remove.append(document_id)
        else:
            first_seen[words] = document_id

    for document_id in to_remove:
        logger.info("Found duplicate document id %d", document_id)
        search_server.remove_document(document_id)
    return to_remove
