from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


def is_degenerate(text: Optional[Sequence], pattern: Optional[Sequence]) -> bool:
    """Return True when no occurrence can exist for these inputs."""
    if text is None or pattern is None or len(pattern) == 0:
        return True
    return len(pattern) > len(text)


class SearchAlgorithm(ABC):
    """
    SearchAlgorithm Abstract Base Class

    This abstract base class defines the interface for single-pattern search
    algorithm implementations. Every implementation reports all (possibly
    overlapping) occurrences of a pattern inside a text as ascending 0-based
    start offsets, and keeps statistics about the last search it performed.

    Degenerate inputs never raise: an empty or missing pattern, a missing
    text, or a pattern longer than the text all produce an empty result.

    Attributes:
        _stats (dict): Statistics about the last search operation.

    Abstract Methods:
        search(text, pattern):
            Finds every occurrence of pattern in text.
            Args:
                text (Sequence): The sequence being searched within
                pattern (Sequence): The sequence being searched for
            Returns:
                List[int]: Ascending start offsets of all matches

    Methods:
        get_stats():
            Returns statistics about the last search operation.
    """
    name = "base"

    def __init__(self) -> None:
        self._stats = {}
        self._reset_stats()

    @abstractmethod
    def search(self, text: Optional[Sequence], pattern: Optional[Sequence]) -> List[int]:
        pass

    def get_stats(self) -> dict:
        return self._stats

    def _reset_stats(self) -> None:
        self._stats.clear()
        self._stats.update({
            "comparisons": 0,
            "matches": 0,
            "search_time": 0.0,
        })

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
