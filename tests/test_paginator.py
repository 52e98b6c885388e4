import math

import pytest

from search_server import Document, InvalidArgumentError, Page, Paginator, paginate


@pytest.mark.parametrize(
    "size, page_size",
    [(0, 1), (1, 1), (5, 2), (6, 2), (6, 3), (7, 10), (10, 1), (11, 4)],
)
def test_page_layout(size, page_size):
    items = list(range(size))
    pages = list(paginate(items, page_size))

    assert len(pages) == math.ceil(size / page_size)
    assert all(len(page) == page_size for page in pages[:-1])
    if pages:
        assert 1 <= len(pages[-1]) <= page_size
    assert [item for page in pages for item in page] == items


def test_len_matches_page_count():
    paginator = paginate(list(range(11)), 4)
    assert len(paginator) == 3
    assert len(list(paginator)) == 3


def test_restartable():
    paginator = Paginator("abcde", 2)
    assert [list(page) for page in paginator] == [["a", "b"], ["c", "d"], ["e"]]
    assert [list(page) for page in paginator] == [["a", "b"], ["c", "d"], ["e"]]


def test_pages_are_views():
    items = [1, 2, 3, 4]
    first, second = paginate(items, 2)
    items[0] = 100
    assert list(first) == [100, 2]
    assert second == [3, 4]


def test_page_indexing():
    page = Page([10, 20, 30, 40], 1, 3)
    assert page[0] == 20
    assert page[-1] == 30
    with pytest.raises(IndexError):
        page[2]


def test_page_str_concatenates_items():
    documents = [Document(1, 0.5, 3), Document(2, 0.25, 1)]
    (page,) = paginate(documents, 2)
    assert str(page) == (
        "{ document_id = 1, relevance = 0.5, rating = 3 }"
        "{ document_id = 2, relevance = 0.25, rating = 1 }"
    )


@pytest.mark.parametrize("page_size", [0, -1])
def test_page_size_must_be_positive(page_size):
    with pytest.raises(InvalidArgumentError):
        paginate([1, 2, 3], page_size)


def test_paginates_iterators():
    paginator = paginate(iter(range(5)), 2)
    assert len(paginator) == 3
    assert [list(page) for page in paginator] == [[0, 1], [2, 3], [4]]
    # restartable even though the source iterator is exhausted
    assert [list(page) for page in paginator] == [[0, 1], [2, 3], [4]]


def test_paginates_generators():
    pages = list(paginate((n * n for n in range(4)), 3))
    assert pages == [[0, 1, 4], [9]]
