import pytest

from search_server import DocumentStatus, SearchServer


@pytest.fixture
def pets_server():
    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2, 3])
    return server


@pytest.fixture
def cats_server():
    server = SearchServer("and in on")
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "groomed starling eugene", DocumentStatus.BANNED, [9])
    return server
