"""calories.py - Calorie counting (2022 day 1)."""
from __future__ import annotations
from typing import Iterable
from .utils.lines import parse_int


def max_group_calories(lines: Iterable[str]) -> int:
    """Return the largest group total; groups are separated by blank lines.

    Raises:
        MalformedInputError: If a non-blank line is not an unsigned integer
    """
    best = 0
    current = 0
    for line in lines:
        if line == "":
            best = max(best, current)
            current = 0
            continue
        current += parse_int(line, "calories")
    return max(best, current)
