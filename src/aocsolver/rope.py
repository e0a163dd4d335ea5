"""rope.py - Rope bridge (2022 day 9).

The head of a rope moves one grid step at a time; each following knot
moves toward the knot ahead whenever the two stop touching. The answer is
the number of distinct positions the tail occupies after a step.
"""
from __future__ import annotations
from typing import Iterable, List, Set, Tuple
from .config import HEADINGS, ROPE_KNOTS
from .types import MalformedInputError
from .utils.lines import parse_int, without_trailing_blanks

Point = Tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def grid_normalize(x: int, y: int) -> Point:
    """Map an offset onto the grid offset a knot should keep behind its leader.

    Diagonal offsets keep their signs; any other offset snaps to the axis
    of its dominant component. Touching offsets map to themselves, so the
    follower stays put.
    """
    if abs(x) == abs(y):
        return _sign(x), _sign(y)
    if y > 0 and y > x and y > -x:
        return 0, 1
    if x > 0 and x > y and y > -x:
        return 1, 0
    if y < 0 and y < x and y < -x:
        return 0, -1
    if x < 0 and x < y and y < -x:
        return -1, 0
    return 0, 0


def follow(leader: Point, knot: Point) -> Point:
    """New position of `knot` after `leader` has moved."""
    dx, dy = grid_normalize(leader[0] - knot[0], leader[1] - knot[1])
    return leader[0] - dx, leader[1] - dy


def parse_motion(line: str) -> Tuple[Point, int]:
    """Parse 'R 4' into a unit heading and a step count."""
    words = line.split(" ")
    if len(words) != 2:
        raise MalformedInputError(f"motion needs a heading and a count: {line!r}")
    try:
        heading = HEADINGS[words[0]]
    except KeyError:
        raise MalformedInputError(f"invalid heading: {words[0]!r}") from None
    return heading, parse_int(words[1], "step count")


def tail_positions(lines: Iterable[str], knots: int = ROPE_KNOTS) -> Set[Point]:
    """Positions the tail occupies after each single step of the head."""
    rope: List[Point] = [(0, 0)] * knots
    visited: Set[Point] = set()
    for line in without_trailing_blanks(lines):
        (hx, hy), steps = parse_motion(line)
        for _ in range(steps):
            rope[0] = (rope[0][0] + hx, rope[0][1] + hy)
            for i in range(1, knots):
                rope[i] = follow(rope[i - 1], rope[i])
            visited.add(rope[-1])
    return visited


def count_tail_positions(lines: Iterable[str]) -> int:
    return len(tail_positions(lines))
