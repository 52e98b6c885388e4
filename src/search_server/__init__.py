from search_server.document import (
    Document,
    DocumentData,
    DocumentPredicate,
    DocumentStatus,
    status_predicate,
)
from search_server.exceptions import (
    DocumentNotFoundError,
    InvalidArgumentError,
    SearchServerError,
)
from search_server.paginator import Page, Paginator, paginate
from search_server.parameters import Parameters
from search_server.query import Query, parse_query
from search_server.remove_duplicates import remove_duplicates
from search_server.request_queue import QueryResult, RequestQueue
from search_server.search_server import SearchServer
from search_server.tokenizer import split_into_words

__all__ = [
    "Document",
    "DocumentData",
    "DocumentNotFoundError",
    "DocumentPredicate",
    "DocumentStatus",
    "InvalidArgumentError",
    "Page",
    "Paginator",
    "Parameters",
    "Query",
    "QueryResult",
    "RequestQueue",
    "SearchServer",
    "SearchServerError",
    "paginate",
    "parse_query",
    "remove_duplicates",
    "split_into_words",
    "status_predicate",
]
