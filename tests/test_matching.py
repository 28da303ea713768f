"""Tests for matching utilities."""

import pytest

from feedback_insights.matching import (
    count_keyword_hits,
    filter_tokens,
    keyword_frequencies,
    matched_keywords,
    matches_any_keyword,
    top_keywords,
)


class TestSubstringMatching:
    """Matching is plain substring containment, false positives included."""

    def test_keyword_inside_longer_word(self) -> None:
        assert matches_any_keyword("inexpensive", ["expensive"]) is True
        assert matches_any_keyword("additional toppings", ["add"]) is True

    def test_phrase_keyword(self) -> None:
        assert matches_any_keyword("better than most", ["better than"]) is True
        assert matches_any_keyword("better, than most", ["better than"]) is False

    def test_count_hits_counts_each_keyword_once(self) -> None:
        assert count_keyword_hits("love love love", ["love"]) == 1
        assert count_keyword_hits("great quality, love it", ["love", "great", "quality", "bad"]) == 3

    def test_filter_tokens_keeps_order(self) -> None:
        assert filter_tokens(["b slow", "fast", "a slow"], ["slow"]) == ["b slow", "a slow"]

    def test_matched_keywords_in_table_order(self) -> None:
        assert matched_keywords(["zeta", "alpha"], ["alpha", "beta", "zeta"]) == ["alpha", "zeta"]


class TestFrequencies:
    """Tests for keyword_frequencies and top_keywords."""

    def test_first_occurrence_order(self) -> None:
        freq = keyword_frequencies(["slow", "bug", "slow bug"], ["bug", "slow"])
        assert list(freq) == ["slow", "bug"]
        assert freq == {"slow": 2, "bug": 2}

    def test_top_keywords_ties_keep_insertion_order(self) -> None:
        assert top_keywords({"slow": 5, "expensive": 5, "bug": 3}) == ["slow", "expensive", "bug"]
        assert top_keywords({"expensive": 5, "slow": 5, "bug": 3}) == ["expensive", "slow", "bug"]

    def test_top_keywords_fewer_than_n(self) -> None:
        assert top_keywords({"slow": 1}, 3) == ["slow"]
        assert top_keywords({}, 3) == []
