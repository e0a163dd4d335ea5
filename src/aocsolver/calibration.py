"""calibration.py - Trebuchet calibration values (2023 day 1)."""
from __future__ import annotations
from typing import Iterable, Tuple
from .config import DIGITS
from .types import MalformedInputError
from .utils.lines import without_trailing_blanks


def first_and_last_digit(line: str) -> Tuple[str, str]:
    """Return the first and last digit characters of line.

    A line with a single digit returns it twice.

    Raises:
        MalformedInputError: If the line contains no digit
    """
    digits = [ch for ch in line if ch in DIGITS]
    if not digits:
        raise MalformedInputError(f"no digit in line: {line!r}")
    return digits[0], digits[-1]


def calibration_value(line: str) -> int:
    first, last = first_and_last_digit(line)
    return int(first + last)


def sum_calibration_values(lines: Iterable[str]) -> int:
    return sum(calibration_value(line) for line in without_trailing_blanks(lines))
