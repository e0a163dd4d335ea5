"""Regolith reservoir tests (2022-14)."""
import numpy as np
import pytest

from aocsolver.sand import (
    build_cave,
    count_resting_sand,
    drop_grain,
    extrude_collinear_points,
    parse_path,
)
from aocsolver.types import AxisSpan, MalformedInputError

SCAN = [
    "498,4 -> 498,6 -> 496,6",
    "503,4 -> 502,4 -> 502,9 -> 494,9",
]


def test_parse_path():
    assert parse_path(SCAN[0]) == [(498, 4), (498, 6), (496, 6)]


@pytest.mark.parametrize("line", ["498,4 -> 498", "498;4", "a,4", "498,4->498,6"])
def test_malformed_paths(line):
    with pytest.raises(MalformedInputError):
        parse_path(line)


def test_extrude_collinear_points():
    assert extrude_collinear_points((12, 13), (12, 12)) == AxisSpan((12, 12), 1, False)
    assert extrude_collinear_points((1, 13), (20, 13)) == AxisSpan((1, 13), 19, True)
    assert extrude_collinear_points((20, 13), (1, 13)) == AxisSpan((1, 13), 19, True)


def test_extrude_rejects_bad_segments():
    with pytest.raises(MalformedInputError, match="zero length"):
        extrude_collinear_points((1, 1), (1, 1))
    with pytest.raises(MalformedInputError, match="diagonal"):
        extrude_collinear_points((1, 1), (2, 2))


def test_build_cave():
    cave, x_offset = build_cave([parse_path(line) for line in SCAN])
    assert x_offset == 493
    assert cave.shape[0] == 10
    assert cave.dtype == np.bool_
    assert cave[4, 498 - x_offset] and cave[6, 496 - x_offset]
    assert cave[9, 494 - x_offset : 503 - x_offset].all()
    assert int(cave.sum()) == 20


def test_first_grain_rests_on_rock():
    cave, x_offset = build_cave([parse_path(line) for line in SCAN])
    assert drop_grain(cave, x_offset)
    assert cave[8, 500 - x_offset]


def test_example_resting_sand():
    assert count_resting_sand(SCAN + [""]) == 24


def test_no_floor_means_no_sand():
    assert count_resting_sand(["400,5 -> 410,5"]) == 0


def test_empty_scan():
    with pytest.raises(MalformedInputError, match="any rock"):
        count_resting_sand([])
