import argparse
import logging
import platform
import sys
from typing import List, Optional

import psutil

from kmp_matcher.cases import CaseFileError, parse_expected, read_test_cases
from kmp_matcher.config.config import DEFAULT_CONFIG_FILE, Config, ConfigError
from kmp_matcher.report import (
    format_complexity,
    format_header,
    format_result,
    format_summary,
    time_search,
)
from kmp_matcher.search.algorithms import ALGORITHMS, get_algorithm

logger = logging.getLogger("KMPMatcher")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmp-matcher",
        description="Run Knuth-Morris-Pratt searches over a file of test cases",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="Path to the INI configuration file")
    parser.add_argument("--input", default=None,
                        help="Case file with one 'text|pattern|expected' entry per line "
                             "(overrides SEARCH.INPUT_FILE)")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default=None,
                        help="Search algorithm (overrides SEARCH.ALGORITHM)")
    parser.add_argument("--verify", action="store_true", default=None,
                        help="Compare every result with its expected offsets")
    parser.add_argument("--no-timing", dest="show_timing", action="store_false", default=None,
                        help="Do not report execution times")
    return parser


def log_system_info(config: Config) -> None:
    """Log interpreter and host details when running in debug mode."""
    if not config.debug:
        return
    config.logger.info("Matcher configuration details: %s", config)
    config.logger.info("System information:")
    config.logger.info("  - OS: %s %s", platform.system(), platform.release())
    config.logger.info("  - Python: %s", platform.python_version())
    config.logger.info("  - CPU: %s cores", psutil.cpu_count(logical=True))
    mem = psutil.virtual_memory()
    config.logger.info(
        "  - Memory: %dGB total, %dGB available",
        mem.total // (1024 ** 3),
        mem.available // (1024 ** 3),
    )


def run(input_file: str, algorithm_name: str = "kmp", verify: bool = False,
        show_timing: bool = True) -> int:
    """
    Search every case of a case file and print the results to stdout.

    Returns:
        int: Process exit status; 1 when the file cannot be read or, with
        ``verify``, when any case does not produce its expected offsets.
    """
    print(format_header())

    try:
        cases = read_test_cases(input_file)
    except CaseFileError as e:
        logger.error("%s", e)
        return 1

    if not cases:
        print(f"No test cases found in {input_file}")
        return 0

    algorithm = get_algorithm(algorithm_name)()
    failed = 0
    for number, case in enumerate(cases, start=1):
        occurrences, elapsed_ns = time_search(algorithm, case.text, case.pattern)
        logger.debug("Test %d stats: %s", number, algorithm.get_stats())

        expected = None
        invalid_expected = None
        if verify:
            try:
                expected = parse_expected(case.expected)
            except ValueError as e:
                logger.warning("Test %d: %s", number, e)
                invalid_expected = case.expected
                failed += 1
            else:
                if occurrences != expected:
                    failed += 1

        print(format_result(number, case, occurrences, elapsed_ns,
                            show_timing=show_timing, expected=expected,
                            invalid_expected=invalid_expected))

    print(format_complexity())
    if verify:
        print()
        print(format_summary(len(cases), failed))
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    log_system_info(config)

    return run(
        input_file=args.input or config.input_file,
        algorithm_name=args.algorithm or config.search_algorithm,
        verify=config.verify if args.verify is None else args.verify,
        show_timing=config.show_timing if args.show_timing is None else args.show_timing,
    )


if __name__ == "__main__":
    sys.exit(main())
