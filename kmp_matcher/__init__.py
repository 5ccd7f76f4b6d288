"""Knuth-Morris-Pratt pattern matching."""

from kmp_matcher.search.algorithms.kmp import build_lps, search

__version__ = "0.1.0"

__all__ = ["build_lps", "search"]
