from typing import Dict, Type

from kmp_matcher.search.base import SearchAlgorithm
from kmp_matcher.search.algorithms.kmp import KMP, build_lps, search
from kmp_matcher.search.algorithms.naive import NaiveSearch

ALGORITHMS: Dict[str, Type[SearchAlgorithm]] = {
    KMP.name: KMP,
    NaiveSearch.name: NaiveSearch,
}


def get_algorithm(name: str) -> Type[SearchAlgorithm]:
    """Return the search algorithm class registered under ``name``."""
    try:
        return ALGORITHMS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown search algorithm '{name}'. "
            f"Valid options: {', '.join(sorted(ALGORITHMS))}"
        ) from None


__all__ = ["ALGORITHMS", "KMP", "NaiveSearch", "build_lps", "get_algorithm", "search"]
