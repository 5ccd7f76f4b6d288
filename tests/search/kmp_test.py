import pytest
from hypothesis import given, strategies as st

from kmp_matcher import build_lps, search


def longest_border(prefix) -> int:
    """Length of the longest proper prefix of ``prefix`` that is also its suffix."""
    for length in range(len(prefix) - 1, 0, -1):
        if prefix[:length] == prefix[-length:]:
            return length
    return 0


def brute_force_offsets(text, pattern):
    return [o for o in range(len(text) - len(pattern) + 1) if text[o:o + len(pattern)] == pattern]


class TestBuildLPS:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("", []),
            ("a", [0]),
            ("abcd", [0, 0, 0, 0]),
            ("aaaa", [0, 1, 2, 3]),
            ("ababaca", [0, 0, 1, 2, 3, 0, 1]),
            ("abcabd", [0, 0, 0, 1, 2, 0]),
            ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
            ("AABAACAABAA", [0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5]),
        ]
    )
    def test_known_tables(self, pattern, expected):
        assert build_lps(pattern) == expected

    def test_works_on_lists(self):
        assert build_lps([1, 2, 1, 2]) == [0, 0, 1, 2]

    def test_counts_computations(self):
        stats = {"prefix_table_computations": 0}
        build_lps("aaaa", stats)
        assert stats["prefix_table_computations"] == 3

    def test_counts_into_empty_stats(self):
        stats = {}
        build_lps("aaaa", stats)
        assert stats == {"prefix_table_computations": 3}

    @given(st.text(alphabet="abc", min_size=1, max_size=40))
    def test_entries_are_longest_borders(self, pattern):
        table = build_lps(pattern)
        assert len(table) == len(pattern)
        assert table[0] == 0
        for i, value in enumerate(table):
            assert 0 <= value <= i
            assert value == longest_border(pattern[:i + 1])


class TestSearch:
    @pytest.mark.parametrize(
        "text, pattern, expected",
        [
            ("aaaa", "aa", [0, 1, 2]),
            ("abcdef", "xyz", []),
            ("hello world", "world", [6]),
            ("abc", "abc", [0]),
            ("ab", "abc", []),
            ("ababcababa", "aba", [0, 5, 7]),
            ("AABAACAADAABAABA", "AABA", [0, 9, 12]),
            ("mississippi", "issi", [1, 4]),
            ("", "a", []),
        ]
    )
    def test_known_offsets(self, text, pattern, expected):
        assert search(text, pattern) == expected

    @pytest.mark.parametrize("text", ["", "a", "abc"])
    def test_empty_pattern(self, text):
        assert search(text, "") == []

    def test_missing_text(self):
        assert search(None, "abc") == []

    def test_returns_new_list_each_call(self):
        first = search("abab", "ab")
        first.append(99)
        assert search("abab", "ab") == [0, 2]

    def test_without_stats_has_no_side_effects(self):
        pattern = list("aba")
        text = list("ababa")
        assert search(text, pattern) == [0, 2]
        assert pattern == list("aba")
        assert text == list("ababa")

    def test_counts_comparisons(self):
        stats = {"comparisons": 0, "prefix_table_computations": 0}
        search("aaaa", "aa", stats)
        assert stats["comparisons"] > 0
        assert stats["prefix_table_computations"] == 1

    def test_counts_into_empty_stats(self):
        stats = {}
        assert search("aaaa", "aa", stats) == [0, 1, 2]
        assert stats["comparisons"] > 0
        assert stats["prefix_table_computations"] == 1

    def test_keeps_existing_counts(self):
        stats = {"comparisons": 10, "other": "kept"}
        search("abab", "ab", stats)
        assert stats["comparisons"] > 10
        assert stats["other"] == "kept"

    @given(st.text(alphabet="ab", max_size=60), st.text(alphabet="ab", min_size=1, max_size=6))
    def test_matches_brute_force(self, text, pattern):
        offsets = search(text, pattern)
        assert offsets == brute_force_offsets(text, pattern)

    @given(st.text(alphabet="abc", max_size=60), st.text(alphabet="abc", min_size=1, max_size=5))
    def test_no_false_positives_and_ascending(self, text, pattern):
        offsets = search(text, pattern)
        assert offsets == sorted(set(offsets))
        for offset in offsets:
            assert text[offset:offset + len(pattern)] == pattern

    @given(st.lists(st.integers(min_value=0, max_value=2), max_size=50),
           st.lists(st.integers(min_value=0, max_value=2), min_size=1, max_size=4))
    def test_integer_sequences(self, text, pattern):
        assert search(text, pattern) == brute_force_offsets(text, pattern)

    @given(st.text(max_size=30), st.text(max_size=30))
    def test_idempotent(self, text, pattern):
        assert search(text, pattern) == search(text, pattern)
