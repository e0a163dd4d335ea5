"""types.py - Canonical dataclasses and the input error.

Defines immutable dataclasses shared by the puzzle modules:
- Span: half-open digit run inside one schematic line
- CubeSet: red/green/blue cube counts (one reveal, or a set of limits)
- SectionRange: inclusive range of camp sections
- AxisSpan: horizontal or vertical run of rock in the cave scan
- MalformedInputError: the single error class for unparseable input
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
from .config import NOT_FOUND


class MalformedInputError(ValueError):
    """Raised by parsing functions when a line or token cannot be parsed.

    Library code never terminates the process; the CLI reports the error
    and exits non-zero.
    """


@dataclass(frozen=True)
class Span:
    """Half-open character interval [start, end) within one line.

    Attributes:
        start: Index of the first digit, or NOT_FOUND
        end: Index one past the last digit, or NOT_FOUND
    """

    start: int
    end: int

    @property
    def found(self) -> bool:
        return self.start != NOT_FOUND

    @property
    def bounds(self) -> Tuple[int, int]:
        """Return (start, end) tuple."""
        return (self.start, self.end)

    def text(self, line: str) -> str:
        return line[self.start:self.end]


SPAN_NOT_FOUND = Span(NOT_FOUND, NOT_FOUND)


@dataclass(frozen=True)
class CubeSet:
    """Cube counts per color.

    Attributes:
        red: Red cubes
        green: Green cubes
        blue: Blue cubes
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    def within(self, limits: CubeSet) -> bool:
        """True if no color exceeds its limit."""
        return (
            self.red <= limits.red
            and self.green <= limits.green
            and self.blue <= limits.blue
        )


@dataclass(frozen=True)
class SectionRange:
    """Inclusive range of section ids.

    Attributes:
        start: First section
        end: Last section (>= start)
    """

    start: int
    end: int

    def __post_init__(self):
        if self.end < self.start:
            raise MalformedInputError(
                f"end ({self.end}) is before start ({self.start})"
            )

    def contains(self, other: SectionRange) -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: SectionRange) -> bool:
        return max(self.start, other.start) <= min(self.end, other.end)


@dataclass(frozen=True)
class AxisSpan:
    """Axis-aligned run of grid points starting at `origin`.

    Attributes:
        origin: (x, y) of the end with the smaller coordinate
        length: Steps from origin to the far end (>= 1)
        horizontal: True if the run goes along x, False if along y
    """

    origin: Tuple[int, int]
    length: int
    horizontal: bool

