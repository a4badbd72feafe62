# src/bashpy/counting.py
"""
Count lines containing a substring, the Python side of ``grep -c ERROR file``.
"""

import logging
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "ERROR"


def count_matching_lines(lines: Iterable[str], pattern: str = DEFAULT_PATTERN) -> int:
    """Count lines containing ``pattern`` as a literal, case-sensitive substring.

    A line is counted once no matter how often the pattern repeats in it.
    """
    return sum(1 for line in lines if pattern in line)


def count_in_file(path, pattern: str = DEFAULT_PATTERN) -> int:
    """Count matching lines in the file at ``path``."""
    with open(path, encoding="utf-8", errors="replace") as fh:
        count = count_matching_lines(fh, pattern)
    logger.info(f"{path}: {count} line(s) containing {pattern!r}")
    return count
