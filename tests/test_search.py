"""Tests for the in-memory search filter."""

from catalog_admin.services.search import filter_by_term, matches_term

NAMES = ["Daft Punk", "Justice", "Punk Rock Girls", "Röyksopp", None]


def by_name(name):
    return (name,)


class TestMatchesTerm:

    def test_case_insensitive_substring(self):
        assert matches_term("punk", "Daft Punk")
        assert matches_term("DAFT", "Daft Punk")
        assert not matches_term("funk", "Daft Punk")

    def test_any_value_matches(self):
        assert matches_term("mail", "Ada", "ada@mail.com")

    def test_none_values_never_match(self):
        assert not matches_term("a", None)


class TestFilterByTerm:

    def test_keeps_order(self):
        assert filter_by_term(NAMES, "punk", by_name) == ["Daft Punk", "Punk Rock Girls"]

    def test_blank_term_keeps_all(self):
        assert filter_by_term(NAMES, "", by_name) == NAMES
        assert filter_by_term(NAMES, None, by_name) == NAMES

    def test_non_ascii(self):
        assert filter_by_term(NAMES, "RÖY", by_name) == ["Röyksopp"]

    def test_idempotent(self):
        for term in ["p", "unk", "ROCK", "s", "zzz"]:
            once = filter_by_term(NAMES, term, by_name)
            assert filter_by_term(once, term, by_name) == once

    def test_refining_an_already_filtered_result(self):
        # Narrowing by a substring of a filtered result equals filtering the original
        filtered = filter_by_term(NAMES, "punk", by_name)
        for term in ["pun", "unk", "k"]:
            assert filter_by_term(filtered, term, by_name) == filter_by_term(
                filter_by_term(NAMES, term, by_name), "punk", by_name
            )
