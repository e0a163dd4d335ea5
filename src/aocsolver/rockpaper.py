"""rockpaper.py - Rock paper scissors strategy guide (2022 day 2).

Each line is '<opponent> <column>'. A/X rock, B/Y paper, C/Z scissors.
Round score = player hand value + outcome score.

Part 1 reads the second column as the player's hand. Part 2 reads it as
the desired outcome (X lose, Y draw, Z win) and picks the hand for it.
"""
from __future__ import annotations
from typing import Iterable, Tuple
from .config import DRAW_SCORE, HAND_VALUES, LOSS_SCORE, OUTCOME_SCORES, WIN_SCORE
from .types import MalformedInputError
from .utils.lines import without_trailing_blanks


def read_hand(letter: str) -> int:
    """Map a hand letter to its value (1 rock, 2 paper, 3 scissors)."""
    try:
        return HAND_VALUES[letter]
    except KeyError:
        raise MalformedInputError(f"invalid hand: {letter!r}") from None


def read_outcome(letter: str) -> int:
    """Map an outcome letter to its score (X 0, Y 3, Z 6)."""
    try:
        return OUTCOME_SCORES[letter]
    except KeyError:
        raise MalformedInputError(f"invalid outcome: {letter!r}") from None


def outcome_score(player: int, opponent: int) -> int:
    if player == opponent:
        return DRAW_SCORE
    # Each hand beats the one just below it, cyclically.
    if (player - opponent) % 3 == 1:
        return WIN_SCORE
    return LOSS_SCORE


def hand_for_outcome(opponent: int, outcome: int) -> int:
    """Hand value that gives `outcome` against `opponent`."""
    if outcome == WIN_SCORE:
        return opponent % 3 + 1
    if outcome == LOSS_SCORE:
        return (opponent - 2) % 3 + 1
    return opponent


def _split_round(line: str) -> Tuple[str, str]:
    columns = line.split(" ")
    if len(columns) != 2:
        raise MalformedInputError(f"round doesn't have two hands: {line!r}")
    return columns[0], columns[1]


def round_score(line: str) -> int:
    first, second = _split_round(line)
    opponent = read_hand(first)
    player = read_hand(second)
    return player + outcome_score(player, opponent)


def planned_round_score(line: str) -> int:
    first, second = _split_round(line)
    opponent = read_hand(first)
    outcome = read_outcome(second)
    return hand_for_outcome(opponent, outcome) + outcome


def total_score(lines: Iterable[str]) -> int:
    return sum(round_score(line) for line in without_trailing_blanks(lines))


def total_planned_score(lines: Iterable[str]) -> int:
    return sum(planned_round_score(line) for line in without_trailing_blanks(lines))
