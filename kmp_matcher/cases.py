"""Reading match cases from ``text|pattern|expected`` files."""

import ast
import logging
from typing import List, NamedTuple

logger = logging.getLogger("KMPMatcher.cases")

FIELD_SEPARATOR = "|"
COMMENT_PREFIX = "#"
DEFAULT_EXPECTED = "[]"


class CaseFileError(Exception):
    """Raised when a case file cannot be read."""
    pass


class MatchCase(NamedTuple):
    text: str
    pattern: str
    expected: str = DEFAULT_EXPECTED


def parse_line(line: str):
    """
    Parse one line of a case file.

    Blank lines and comment lines yield None, as do lines with fewer than
    two fields. Empty trailing fields are discarded before counting, so
    ``abc|`` is a single-field line.

    Args:
        line: The raw line, without its line terminator.

    Returns:
        Optional[MatchCase]: The parsed case, or None if the line holds none.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = line.split(FIELD_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()

    if len(parts) < 2:
        return None

    expected = parts[2] if len(parts) > 2 else DEFAULT_EXPECTED
    return MatchCase(parts[0], parts[1], expected)


def read_test_cases(file_path: str) -> List[MatchCase]:
    """
    Read every match case from a file.

    Args:
        file_path: Path to the case file.

    Returns:
        List[MatchCase]: The cases in file order.

    Raises:
        CaseFileError: If the file does not exist or cannot be read.
    """
    cases = []
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            for line_number, line in enumerate(file, start=1):
                case = parse_line(line.rstrip("\r\n"))
                if case is None:
                    if line.strip() and not line.strip().startswith(COMMENT_PREFIX):
                        logger.debug("Skipping malformed line %d in %s", line_number, file_path)
                    continue
                cases.append(case)
    except FileNotFoundError as e:
        raise CaseFileError(f"Input file not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CaseFileError(f"Error reading input file: {e}") from e

    logger.info("Loaded %d test cases from %s", len(cases), file_path)
    return cases


def parse_expected(raw: str) -> List[int]:
    """
    Parse an expected-offsets field such as ``[0, 5, 7]``.

    Raises:
        ValueError: If the field is not a bracketed list of non-negative integers.
    """
    try:
        value = ast.literal_eval(raw.strip())
    except (ValueError, SyntaxError) as e:
        raise ValueError(f"Invalid expected offsets: '{raw}'") from e

    if not isinstance(value, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) and item >= 0 for item in value
    ):
        raise ValueError(f"Invalid expected offsets: '{raw}'")
    return value
