from kmp_matcher.cases import MatchCase
from kmp_matcher.report import (
    format_complexity,
    format_header,
    format_result,
    format_summary,
    time_search,
)
from kmp_matcher.search.algorithms import KMP


def test_time_search():
    occurrences, elapsed_ns = time_search(KMP(), "aaaa", "aa")
    assert occurrences == [0, 1, 2]
    assert isinstance(elapsed_ns, int)
    assert elapsed_ns >= 0


def test_format_header():
    header = format_header()
    assert header.startswith("KMP String Matching Algorithm - Test Results\n")
    assert "=" * 45 in header


def test_format_result():
    block = format_result(3, MatchCase("aaaa", "aa"), [0, 1, 2], 1500)
    assert block == (
        "TEST 3:\n"
        'Text: "aaaa"\n'
        'Pattern: "aa"\n'
        "Occurrences: [0, 1, 2]\n"
        "Count: 3\n"
        "Execution time: 1500 nanoseconds\n"
    )


def test_format_result_without_timing():
    block = format_result(1, MatchCase("abc", "x"), [], 10, show_timing=False)
    assert "Execution time" not in block
    assert "Occurrences: []" in block
    assert "Count: 0" in block


def test_format_result_verified():
    passed = format_result(1, MatchCase("abc", "abc", "[0]"), [0], 10, expected=[0])
    failed = format_result(2, MatchCase("abc", "abc", "[1]"), [0], 10, expected=[1])
    assert "Expected: [0]\nResult: PASS" in passed
    assert "Expected: [1]\nResult: FAIL" in failed


def test_format_complexity():
    assert format_complexity().splitlines() == [
        "COMPLEXITY ANALYSIS:",
        "Time Complexity: O(n + m)",
        "Space Complexity: O(m)",
    ]


def test_format_summary():
    assert format_summary(5, 0) == "Verified 5 test cases: ALL PASSED"
    assert format_summary(5, 2) == "Verified 5 test cases: 2 FAILED"


def test_format_result_invalid_expected():
    block = format_result(1, MatchCase("abc", "b", "oops"), [1], 10, invalid_expected="oops")
    assert "Expected: oops (invalid)\nResult: FAIL" in block
