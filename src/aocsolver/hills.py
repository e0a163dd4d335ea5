"""hills.py - Hill climbing shortest path (2022 day 12).

The height map is a grid of a..z, with S (start, height a) and E (end,
height z). A step to an orthogonal neighbour is allowed when the neighbour is
at most MAX_CLIMB higher. Steps become directed edges of a sparse adjacency
matrix over raster-ordered cells; the shortest path is found by BFS.
Part 2 starts from whichever lowest square is closest to E.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple
import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order, shortest_path
from .config import (
    END_MARK,
    GRID_DTYPE,
    HIGHEST_ELEVATION,
    INT_DTYPE,
    LOWEST_ELEVATION,
    MAX_CLIMB,
    START_MARK,
)
from .types import MalformedInputError
from .utils.lines import without_trailing_blanks

# scipy marks unreached nodes in the predecessor array with this value
_NO_PREDECESSOR = -9999


def parse_height_map(lines: Iterable[str]) -> Tuple[np.ndarray, int, int]:
    """Parse the map into an elevation grid and raster start/end indices.

    Returns:
        elevations: (H, W) int32 grid, a=0 .. z=25
        start: raster index of S
        end: raster index of E

    Raises:
        MalformedInputError: On unknown characters, ragged rows,
            or a missing start/end
    """
    rows: List[List[int]] = []
    start = end = None
    width = None
    for r, line in enumerate(without_trailing_blanks(lines)):
        if width is None:
            width = len(line)
        elif len(line) != width:
            raise MalformedInputError("map rows are not of the same length")

        row = []
        for c, ch in enumerate(line):
            if ch == START_MARK:
                start = r * width + c
                ch = LOWEST_ELEVATION
            elif ch == END_MARK:
                end = r * width + c
                ch = HIGHEST_ELEVATION
            if not (LOWEST_ELEVATION <= ch <= HIGHEST_ELEVATION):
                raise MalformedInputError(f"invalid map square {ch!r} at row {r}")
            row.append(ord(ch) - ord(LOWEST_ELEVATION))
        rows.append(row)

    if not rows or width == 0:
        raise MalformedInputError("map doesn't have any squares")
    if start is None:
        raise MalformedInputError("map did not contain a start point")
    if end is None:
        raise MalformedInputError("map did not contain an end point")

    return np.asarray(rows, dtype=GRID_DTYPE), start, end


def build_climb_graph(elevations: np.ndarray) -> scipy.sparse.csr_matrix:
    """Directed adjacency over raster indices for every allowed step."""
    H, W = elevations.shape
    idx = np.arange(H * W, dtype=INT_DTYPE).reshape(H, W)

    # (source cells, target cells) for right, left, down, up
    pairs = [
        (np.s_[:, :-1], np.s_[:, 1:]),
        (np.s_[:, 1:], np.s_[:, :-1]),
        (np.s_[:-1, :], np.s_[1:, :]),
        (np.s_[1:, :], np.s_[:-1, :]),
    ]

    rows_adj = []
    cols_adj = []
    for src, dst in pairs:
        allowed = elevations[dst] <= elevations[src] + MAX_CLIMB
        rows_adj.append(idx[src][allowed])
        cols_adj.append(idx[dst][allowed])

    rows_adj = np.concatenate(rows_adj)
    cols_adj = np.concatenate(cols_adj)
    return scipy.sparse.csr_matrix(
        (np.ones(len(rows_adj), dtype=np.int32), (rows_adj, cols_adj)),
        shape=(H * W, H * W),
    )


def shortest_path_length(graph: scipy.sparse.csr_matrix, start: int, end: int) -> int:
    """Number of steps on a shortest start -> end path.

    Raises:
        MalformedInputError: If end is unreachable
    """
    _, predecessors = breadth_first_order(
        graph, i_start=start, directed=True, return_predecessors=True
    )
    if end != start and predecessors[end] == _NO_PREDECESSOR:
        raise MalformedInputError("end not reachable from start")

    steps = 0
    node = end
    while node != start:
        node = predecessors[node]
        steps += 1
    return steps


def fewest_steps(lines: Iterable[str]) -> int:
    elevations, start, end = parse_height_map(lines)
    graph = build_climb_graph(elevations)
    return shortest_path_length(graph, start, end)


def fewest_steps_from_lowest(lines: Iterable[str]) -> int:
    """Fewest steps to E from any square at the lowest elevation.

    Searches backwards from E over the reversed climb graph, so one pass
    gives the distance from every square.

    Raises:
        MalformedInputError: If no lowest square can reach E
    """
    elevations, _, end = parse_height_map(lines)
    reverse = build_climb_graph(elevations).T.tocsr()
    distances = shortest_path(reverse, directed=True, unweighted=True, indices=end)
    lowest = distances[elevations.ravel() == 0]
    lowest = lowest[np.isfinite(lowest)]
    if lowest.size == 0:
        raise MalformedInputError("end not reachable from any lowest square")
    return int(lowest.min())
