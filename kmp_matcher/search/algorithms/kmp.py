import time
from typing import List, Optional, Sequence

from kmp_matcher.search.base import SearchAlgorithm, is_degenerate


def build_lps(pattern: Sequence, stats: Optional[dict] = None) -> List[int]:
    """
    Build the longest proper prefix-suffix (LPS) table of a pattern.

    ``table[i]`` is the length of the longest proper prefix of
    ``pattern[0..i]`` that is also a suffix of it. The empty pattern yields
    an empty table.

    Args:
        pattern (Sequence): The pattern to preprocess.
        stats (dict, optional): When given, ``prefix_table_computations`` is
            incremented once per loop iteration.

    Returns:
        List[int]: The LPS table, one entry per pattern element.
    """
    if stats is not None:
        stats.setdefault("prefix_table_computations", 0)

    length = len(pattern)
    lps = [0] * length

    len_prev_lps = 0
    for i in range(1, length):
        while len_prev_lps > 0 and pattern[i] != pattern[len_prev_lps]:
            if stats is not None:
                stats["prefix_table_computations"] += 1
            len_prev_lps = lps[len_prev_lps - 1]

        if stats is not None:
            stats["prefix_table_computations"] += 1
        if pattern[i] == pattern[len_prev_lps]:
            len_prev_lps += 1
            lps[i] = len_prev_lps
        else:
            lps[i] = 0

    return lps


def search(text: Optional[Sequence], pattern: Optional[Sequence],
           stats: Optional[dict] = None) -> List[int]:
    """
    Find every occurrence of pattern in text with the Knuth-Morris-Pratt algorithm.

    The text index never moves backwards: on a mismatch the pattern index
    falls back through the LPS table instead of rescanning matched text.
    After a full match the scan resumes from the longest border of the
    pattern, so overlapping occurrences are reported.

    An empty pattern matches nowhere. A missing text or pattern, and a
    pattern longer than the text, also return an empty list.

    Args:
        text (Sequence): The sequence being searched within.
        pattern (Sequence): The sequence being searched for.
        stats (dict, optional): When given, ``comparisons`` and
            ``prefix_table_computations`` are incremented in it.

    Returns:
        List[int]: Ascending 0-based start offsets of all matches.
    """
    occurrences: List[int] = []
    if is_degenerate(text, pattern):
        return occurrences

    if stats is not None:
        stats.setdefault("comparisons", 0)

    n = len(text)
    m = len(pattern)
    lps = build_lps(pattern, stats)

    i = 0  # Index for text
    j = 0  # Index for pattern

    while i < n:
        if stats is not None:
            stats["comparisons"] += 1

        if pattern[j] == text[i]:
            i += 1
            j += 1

        if j == m:
            occurrences.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

    return occurrences


class KMP(SearchAlgorithm):
    """
    KMP (Knuth-Morris-Pratt) string search algorithm implementation.

    Wraps the module level :func:`build_lps` and :func:`search` functions
    and records how much work each call performed.

    Attributes:
        _stats (dict): Statistics about the last search, including the
            number of scanner comparisons, prefix table computations,
            matches found and the search time in seconds.

    Example:
        >>> searcher = KMP()
        >>> searcher.search("aaaa", "aa")
        [0, 1, 2]
        >>> searcher.get_stats()["matches"]
        3
    """
    name = "kmp"

    def _reset_stats(self) -> None:
        super()._reset_stats()
        self._stats["prefix_table_computations"] = 0

    def search(self, text: Optional[Sequence], pattern: Optional[Sequence]) -> List[int]:
        start_time = time.perf_counter()
        self._reset_stats()

        occurrences = search(text, pattern, self._stats)

        self._stats["matches"] = len(occurrences)
        self._stats["search_time"] = time.perf_counter() - start_time
        return occurrences
