"""forest.py - Treetop tree house scenic scores (2022 day 8).

The forest is an (H, W) height grid. A tree's scenic score is the product of
its viewing distances looking in the four directions. Distances for each
direction are computed by quarter-turning the grid so that direction points
right, scanning rows, and turning the result back.
"""
from __future__ import annotations
from typing import Iterable
import numpy as np
from .config import DIGITS, GRID_DTYPE, INT_DTYPE
from .types import MalformedInputError
from .utils.lines import without_trailing_blanks


def parse_forest(lines: Iterable[str]) -> np.ndarray:
    """Parse digit rows into an (H, W) int32 height grid.

    Raises:
        MalformedInputError: On a non-digit, ragged rows, or an empty grid
    """
    rows = []
    for r, line in enumerate(without_trailing_blanks(lines)):
        bad = [ch for ch in line if ch not in DIGITS]
        if bad or line == "":
            raise MalformedInputError(f"non-digit in forest row {r}: {line!r}")
        rows.append([int(ch) for ch in line])

    if not rows:
        raise MalformedInputError("forest is empty")

    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MalformedInputError("forest rows are not of the same length")

    return np.asarray(rows, dtype=GRID_DTYPE)


def viewing_distances(row: np.ndarray) -> np.ndarray:
    """Trees visible looking right from each tree.

    Counting stops at the first tree at least as tall (that tree is counted)
    or at the edge. Edge trees see 0.

    Example:
        [3, 0, 3, 7, 3] -> [2, 1, 1, 1, 0]
    """
    n = row.shape[0]
    out = np.zeros(n, dtype=INT_DTYPE)
    for i in range(n):
        for j in range(i + 1, n):
            out[i] += 1
            if row[i] <= row[j]:
                break
    return out


def scenic_score_map(forest: np.ndarray) -> np.ndarray:
    """Scenic score for every tree, same shape as forest."""
    if forest.ndim != 2:
        raise ValueError(f"Forest must be 2D, got shape {forest.shape}")

    scores = np.ones(forest.shape, dtype=INT_DTYPE)
    for k in range(4):
        turned = np.rot90(forest, k)
        distances = np.stack([viewing_distances(row) for row in turned])
        scores *= np.rot90(distances, -k)
    return scores


def max_scenic_score(lines: Iterable[str]) -> int:
    forest = parse_forest(lines)
    return int(scenic_score_map(forest).max())
