"""cleanup.py - Camp cleanup assignment pairs (2022 day 4)."""
from __future__ import annotations
from typing import Iterable, Iterator, Tuple
from .types import SectionRange
from .utils.lines import parse_int, parse_pair, without_trailing_blanks


def parse_range(text: str) -> SectionRange:
    """Parse 'a-b' into a SectionRange."""
    start, end = parse_pair(text, "-")
    return SectionRange(parse_int(start, "range start"), parse_int(end, "range end"))


def parse_assignment_pair(line: str) -> Tuple[SectionRange, SectionRange]:
    first, second = parse_pair(line, ",")
    return parse_range(first), parse_range(second)


def _assignment_pairs(lines: Iterable[str]) -> Iterator[Tuple[SectionRange, SectionRange]]:
    for line in without_trailing_blanks(lines):
        yield parse_assignment_pair(line)


def count_contained_pairs(lines: Iterable[str]) -> int:
    """Count pairs where one range fully contains the other."""
    return sum(
        1
        for first, second in _assignment_pairs(lines)
        if first.contains(second) or second.contains(first)
    )


def count_overlapping_pairs(lines: Iterable[str]) -> int:
    """Count pairs whose ranges share at least one section."""
    return sum(1 for first, second in _assignment_pairs(lines) if first.overlaps(second))
