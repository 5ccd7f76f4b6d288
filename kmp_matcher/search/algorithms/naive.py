import time
from typing import List, Optional, Sequence

from kmp_matcher.search.base import SearchAlgorithm, is_degenerate


class NaiveSearch(SearchAlgorithm):
    """
    A brute-force search that compares the pattern against every window of the text.

    This class provides the straightforward baseline the KMP implementation
    is measured against. After a mismatch it restarts the comparison at the
    next text position, so previously matched elements are examined again.

    Performance characteristics:
        - Time complexity: O(n * m) in the worst case
        - Space complexity: O(1) besides the result list
        - Best case: O(n) when mismatches happen on the first element

    Attributes:
        _stats (dict): Performance statistics including:
            - comparisons: Number of element comparisons performed
            - matches: Number of occurrences found
            - search_time: Total search execution time in seconds

    Example:
        >>> searcher = NaiveSearch()
        >>> searcher.search("hello world", "world")
        [6]

    Note:
        The degenerate-input policy is the same as for KMP: an empty pattern
        never matches.
    """
    name = "naive"

    def search(self, text: Optional[Sequence], pattern: Optional[Sequence]) -> List[int]:
        start_time = time.perf_counter()
        self._reset_stats()
        occurrences: List[int] = []

        if is_degenerate(text, pattern):
            self._stats["search_time"] = time.perf_counter() - start_time
            return occurrences

        n = len(text)
        m = len(pattern)
        for offset in range(n - m + 1):
            j = 0
            while j < m:
                self._stats["comparisons"] += 1
                if text[offset + j] != pattern[j]:
                    break
                j += 1
            if j == m:
                occurrences.append(offset)

        self._stats["matches"] = len(occurrences)
        self._stats["search_time"] = time.perf_counter() - start_time
        return occurrences
