"""sand.py - Regolith reservoir (2022 day 14).

Each line traces rock as a path of points, 'x,y -> x,y -> ...', joined by
horizontal or vertical segments. Sand falls one unit at a time from
SAND_SOURCE: down, else down-left, else down-right, else it rests. The
answer is how many units come to rest before one falls past the lowest
rock.

The cave is a boolean (rows = y, cols = x - x_offset) numpy grid, one
column wider than the rock on each side so falling sand never leaves it
sideways before dropping out of the bottom.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple
import numpy as np
from .config import SAND_SOURCE
from .types import AxisSpan, MalformedInputError
from .utils.lines import parse_int, parse_pair, without_trailing_blanks

Point = Tuple[int, int]


def parse_path(line: str) -> List[Point]:
    points = []
    for token in line.split(" -> "):
        x, y = parse_pair(token, ",")
        points.append((parse_int(x, "x coordinate"), parse_int(y, "y coordinate")))
    return points


def extrude_collinear_points(a: Point, b: Point) -> AxisSpan:
    """Describe the segment a-b as a run from its lower end.

    Raises:
        MalformedInputError: If the points coincide or are not axis-aligned
    """
    if a == b:
        raise MalformedInputError(f"segment has zero length at {a}")
    if a[0] == b[0]:
        return AxisSpan(min(a, b, key=lambda p: p[1]), abs(a[1] - b[1]), False)
    if a[1] == b[1]:
        return AxisSpan(min(a, b, key=lambda p: p[0]), abs(a[0] - b[0]), True)
    raise MalformedInputError(f"segment {a} -> {b} is diagonal")


def build_cave(paths: List[List[Point]]) -> Tuple[np.ndarray, int]:
    """Rasterize rock paths.

    Returns:
        cave: (max_y + 1, width) bool grid, True where blocked
        x_offset: x coordinate of column 0

    Raises:
        MalformedInputError: If there is no rock
    """
    points = [p for path in paths for p in path]
    if not points:
        raise MalformedInputError("scan doesn't contain any rock")
    xs = [x for x, _ in points] + [SAND_SOURCE[0]]
    ys = [y for _, y in points]
    x_offset = min(xs) - 1
    cave = np.zeros((max(ys) + 1, max(xs) - x_offset + 2), dtype=bool)

    for path in paths:
        if len(path) == 1:
            x, y = path[0]
            cave[y, x - x_offset] = True
        for a, b in zip(path, path[1:]):
            span = extrude_collinear_points(a, b)
            x, y = span.origin
            col = x - x_offset
            if span.horizontal:
                cave[y, col:col + span.length + 1] = True
            else:
                cave[y:y + span.length + 1, col] = True
    return cave, x_offset


def drop_grain(cave: np.ndarray, x_offset: int) -> bool:
    """Drop one grain from the source; return False if it falls out.

    A resting grain is marked in `cave`.
    """
    col, row = SAND_SOURCE[0] - x_offset, SAND_SOURCE[1]
    if cave[row, col]:
        return False
    bottom = cave.shape[0] - 1
    while row < bottom:
        for step in (0, -1, 1):
            if not cave[row + 1, col + step]:
                row, col = row + 1, col + step
                break
        else:
            cave[row, col] = True
            return True
    return False


def count_resting_sand(lines: Iterable[str]) -> int:
    paths = [parse_path(line) for line in without_trailing_blanks(lines)]
    cave, x_offset = build_cave(paths)
    grains = 0
    while drop_grain(cave, x_offset):
        grains += 1
    return grains
