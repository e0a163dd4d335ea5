"""schematic.py - Engine schematic part-number scanner (2023 day 3).

A number is a part number when a symbol touches any of its cells, including
diagonally. Lines are streamed through a three-slot window
(previous/current/next) so only O(1) lines are held at a time.

Check order for each number span [start, end) on the current line, first
match wins:
1. previous line, window [start-1, end+1)
2. current line, the cell at start-1
3. current line, the cell at end
4. next line, window [start-1, end+1)
"""
from __future__ import annotations
import sys
from typing import Iterable, Iterator, Optional, Tuple
from .config import DIGITS, SYMBOLS
from .types import Span, SPAN_NOT_FOUND


def scan_for_number(line: str, offset: int = 0) -> Span:
    """Find the next maximal digit run at or after offset.

    Args:
        line: Schematic line (no terminator)
        offset: Absolute index to start scanning from

    Returns:
        Span with absolute indices, or SPAN_NOT_FOUND if no digit remains
    """
    start = max(offset, 0)
    n = len(line)
    while start < n and line[start] not in DIGITS:
        start += 1
    if start >= n:
        return SPAN_NOT_FOUND

    end = start + 1
    while end < n and line[end] in DIGITS:
        end += 1
    return Span(start, end)


def iter_number_spans(line: str) -> Iterator[Span]:
    """Yield every maximal digit run in the line, left to right."""
    span = scan_for_number(line, 0)
    while span.found:
        yield span
        span = scan_for_number(line, span.end)


def clamped_slice(line: str, start: int, end: int) -> str:
    """Return line[start:end] with the interval clamped to the line.

    Never fails on negative or overflowing indices; an interval entirely
    outside the line gives "".
    """
    n = len(line)
    start = min(max(start, 0), n)
    end = min(max(end, 0), n)
    if start > end:
        start = end
    return line[start:end]


def has_symbol(text: str) -> bool:
    return any(ch in SYMBOLS for ch in text)


class LineWindow:
    """Three named slots over a stream of lines.

    `push` shifts previous <- current <- next <- line. Pushing None marks the
    end of input so the final line can be processed without a next line.
    """

    def __init__(self):
        self.previous: Optional[str] = None
        self.current: Optional[str] = None
        self.next: Optional[str] = None

    def push(self, line: Optional[str]) -> None:
        self.previous = self.current
        self.current = self.next
        self.next = line

    def adjacent_side(self, span: Span) -> Optional[str]:
        """Return where a symbol touches span on the current line, or None.

        Returns one of "above", "left", "right", "below".
        """
        line = self.current
        start, end = span.bounds

        if self.previous is not None:
            if has_symbol(clamped_slice(self.previous, start - 1, end + 1)):
                return "above"

        if start - 1 >= 0 and line[start - 1] in SYMBOLS:
            return "left"

        if end < len(line) and line[end] in SYMBOLS:
            return "right"

        if self.next is not None:
            if has_symbol(clamped_slice(self.next, start - 1, end + 1)):
                return "below"

        return None

    def classify_current(self) -> Iterator[Tuple[int, Optional[str]]]:
        """Yield (number, side) for every number on the current line."""
        for span in iter_number_spans(self.current):
            yield int(span.text(self.current)), self.adjacent_side(span)


def iter_part_numbers(lines: Iterable[str], verbose: bool = False) -> Iterator[int]:
    """Yield each part number of the schematic in reading order.

    The schematic ends at end of input or at the first blank line.
    """
    window = LineWindow()

    def drain() -> Iterator[int]:
        for num, side in window.classify_current():
            if verbose:
                status = f"counted ({side})" if side else "skipped"
                print(f"[2023-03] {num}: {status}", file=sys.stderr)
            if side is not None:
                yield num

    for line in lines:
        if line == "":
            break
        window.push(line)
        if window.current is not None:
            yield from drain()

    window.push(None)
    if window.current is not None:
        yield from drain()


def sum_part_numbers(lines: Iterable[str], verbose: bool = False) -> int:
    """Sum every number adjacent to at least one symbol."""
    return sum(iter_part_numbers(lines, verbose=verbose))
