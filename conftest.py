import os
import pytest


@pytest.fixture
def case_file(tmp_path):
    """Factory fixture that writes a case file and returns its path."""
    def _write(content: str, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def config_file(tmp_path):
    """Factory fixture that writes an INI config file and returns its path."""
    def _write(input_file: str = "data/input.txt", algorithm: str = "kmp", verify: str = "false",
               show_timing: str = "true", level: str = "INFO", log_file: str = "",
               debug: str = "false", extra: str = "") -> str:
        path = os.path.join(str(tmp_path), "matcher.conf")
        content = f"""
[SEARCH]
INPUT_FILE = {input_file}
ALGORITHM = {algorithm}
VERIFY = {verify}

[REPORT]
SHOW_TIMING = {show_timing}

[LOGGING]
LEVEL = {level}
FILE = {log_file}
DEBUG = {debug}
{extra}
"""
        with open(path, 'w') as f:
            f.write(content)
        return path
    return _write
