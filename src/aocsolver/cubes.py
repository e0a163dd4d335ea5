"""cubes.py - Cube conundrum game records (2023 day 2).

Record format:
    Game <id>: <n> <color>, <n> <color>; <n> <color>; ...

A game is possible when none of its reveals shows more cubes of a color than
the bag limit for that color.
"""
from __future__ import annotations
import sys
from typing import Dict, Iterable, List, Tuple
from .config import CUBE_COLORS
from .types import CubeSet, MalformedInputError
from .utils.lines import parse_int, parse_pair, without_trailing_blanks


def parse_cube(text: str) -> Tuple[int, str]:
    """Parse '<n> <color>' into (amount, color).

    Raises:
        MalformedInputError: If not two tokens or amount is not an integer
    """
    items = text.split(" ")
    if len(items) != 2:
        raise MalformedInputError(f"cube items not 2: {items}")
    amount = parse_int(items[0], "cube amount")
    return amount, items[1]


def parse_reveal(text: str) -> CubeSet:
    """Parse one comma-separated reveal into a CubeSet.

    Colors not mentioned count as zero.

    Raises:
        MalformedInputError: On an unknown color or bad cube
    """
    counts: Dict[str, int] = {}
    for cube in text.split(", "):
        amount, color = parse_cube(cube)
        if color not in CUBE_COLORS:
            raise MalformedInputError(f"invalid color: {color!r}")
        counts[color] = amount
    return CubeSet(**counts)


def parse_game(line: str) -> Tuple[int, List[CubeSet]]:
    """Parse a full game record.

    Returns:
        (game_id, reveals)

    Raises:
        MalformedInputError: On a bad header or reveal
    """
    header, body = parse_pair(line, ": ")
    words = header.split(" ")
    if len(words) != 2 or words[0] != "Game":
        raise MalformedInputError(f"game header is not 'Game <id>': {header!r}")
    game_id = parse_int(words[1], "game id")
    reveals = [parse_reveal(r) for r in body.split("; ")]
    return game_id, reveals


def game_is_possible(reveals: Iterable[CubeSet], limits: CubeSet) -> bool:
    return all(reveal.within(limits) for reveal in reveals)


def sum_possible_game_ids(
    lines: Iterable[str], limits: CubeSet, verbose: bool = False
) -> int:
    """Sum the ids of every game possible under limits."""
    total = 0
    for line in without_trailing_blanks(lines):
        game_id, reveals = parse_game(line)
        possible = game_is_possible(reveals, limits)
        if verbose:
            status = "possible" if possible else "not possible"
            print(f"[2023-02] game {game_id}: {status} {reveals}", file=sys.stderr)
        if possible:
            total += game_id
    return total
