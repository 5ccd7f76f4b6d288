import time
from textwrap import dedent
from typing import List, Optional, Sequence, Tuple

from kmp_matcher.cases import MatchCase
from kmp_matcher.search.base import SearchAlgorithm

HEADER_TITLE = "KMP String Matching Algorithm - Test Results"


def time_search(algorithm: SearchAlgorithm, text: Sequence, pattern: Sequence) -> Tuple[List[int], int]:
    """
    Run one search and measure its wall-clock duration.

    Returns:
        Tuple[List[int], int]: The match offsets and the elapsed nanoseconds.
    """
    start_time = time.perf_counter_ns()
    occurrences = algorithm.search(text, pattern)
    elapsed_ns = time.perf_counter_ns() - start_time
    return occurrences, elapsed_ns


def format_header() -> str:
    return f"{HEADER_TITLE}\n{'=' * (len(HEADER_TITLE) + 1)}\n"


def format_result(number: int, case: MatchCase, occurrences: List[int], elapsed_ns: int,
                  show_timing: bool = True, expected: Optional[List[int]] = None,
                  invalid_expected: Optional[str] = None) -> str:
    """
    Render the result block of a single test case.

    Args:
        number: 1-based position of the case in its file.
        case: The case that was searched.
        occurrences: Offsets returned by the search.
        elapsed_ns: Duration of the search in nanoseconds.
        show_timing: Whether to include the execution time line.
        expected: When given, the expected offsets and a PASS/FAIL verdict are
            appended.
        invalid_expected: The raw expected field when it could not be parsed;
            it is shown with a FAIL verdict.

    Returns:
        str: The block, terminated by a blank line.
    """
    lines = [
        f"TEST {number}:",
        f'Text: "{case.text}"',
        f'Pattern: "{case.pattern}"',
        f"Occurrences: {occurrences}",
        f"Count: {len(occurrences)}",
    ]
    if show_timing:
        lines.append(f"Execution time: {elapsed_ns} nanoseconds")
    if expected is not None:
        lines.append(f"Expected: {expected}")
        lines.append(f"Result: {'PASS' if occurrences == expected else 'FAIL'}")
    elif invalid_expected is not None:
        lines.append(f"Expected: {invalid_expected} (invalid)")
        lines.append("Result: FAIL")
    return "\n".join(lines) + "\n"


def format_complexity() -> str:
    return dedent("""\
        COMPLEXITY ANALYSIS:
        Time Complexity: O(n + m)
        Space Complexity: O(m)""")


def format_summary(total: int, failed: int) -> str:
    status = "ALL PASSED" if failed == 0 else f"{failed} FAILED"
    return f"Verified {total} test cases: {status}"
