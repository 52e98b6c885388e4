import pytest

from search_server.exceptions import InvalidArgumentError
from search_server.query import Query, QueryWord, parse_query, parse_query_word


class TestParseQueryWord:
    def test_plus_word(self):
        assert parse_query_word("cat", set()) == QueryWord("cat", False, False)

    def test_minus_word_is_stripped(self):
        assert parse_query_word("-cat", set()) == QueryWord("cat", True, False)

    def test_stop_word_flag(self):
        assert parse_query_word("-in", {"in"}) == QueryWord("in", True, True)

    def test_dangling_minus(self):
        with pytest.raises(InvalidArgumentError, match="dangling minus"):
            parse_query_word("-", set())

    @pytest.mark.parametrize("word", ["--cat", "---", "--"])
    def test_double_minus(self, word):
        with pytest.raises(InvalidArgumentError, match="double minus"):
            parse_query_word(word, set())

    def test_inner_minus_is_part_of_word(self):
        assert parse_query_word("well-known", set()) == QueryWord("well-known")


class TestParseQuery:
    def test_plus_and_minus_words(self):
        query = parse_query("fluffy -collar cat")
        assert query == Query(frozenset({"fluffy", "cat"}), frozenset({"collar"}))

    def test_duplicates_collapse(self):
        query = parse_query("cat cat -dog -dog")
        assert query.plus_words == {"cat"}
        assert query.minus_words == {"dog"}

    def test_stop_words_removed_from_both_sides(self):
        query = parse_query("cat in -the city", {"in", "the"})
        assert query.plus_words == {"cat", "city"}
        assert query.minus_words == frozenset()

    def test_term_given_both_ways_is_only_excluded(self):
        query = parse_query("cat -cat")
        assert query.plus_words == frozenset()
        assert query.minus_words == {"cat"}

    def test_empty_query(self):
        assert parse_query("   ") == Query()

    @pytest.mark.parametrize("text", ["cat -", "cat --dog", "cat\tdog", "c\x01at"])
    def test_invalid_queries(self, text):
        with pytest.raises(InvalidArgumentError):
            parse_query(text)
