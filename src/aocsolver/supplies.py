"""supplies.py - Supply stacks (2022 day 5).

Input is a crate diagram, one blank line, then rearrangement steps:

        [D]
    [N] [C]
    [Z] [M] [P]
     1   2   3

    move 1 from 2 to 1

Crate letters sit at columns 1, 5, 9, ... of each diagram row; the last
diagram row numbers the stacks. Part 1 moves crates one at a time, so a
moved block lands reversed. Part 2 moves the block in one go, keeping its
order. The answer is the top crate of each stack, read left to right.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from .types import MalformedInputError
from .utils.lines import parse_int, without_trailing_blanks

Stacks = List[List[str]]

# Column of the first crate letter and the spacing between stacks
_CRATE_COLUMN = 1
_STACK_PITCH = 4


@dataclass(frozen=True)
class Move:
    """One rearrangement step. Stacks are numbered from 1."""

    quantity: int
    origin: int
    destination: int


def parse_diagram(rows: List[str]) -> Stacks:
    """Parse diagram rows into stacks, bottom crate first.

    Raises:
        MalformedInputError: If the number row is missing or out of order,
            or a crate is not a single uppercase letter
    """
    if not rows:
        raise MalformedInputError("crate diagram is empty")
    *layers, numbers = rows
    labels = numbers.split()
    if labels != [str(i) for i in range(1, len(labels) + 1)]:
        raise MalformedInputError(f"stack numbers are not 1..n: {numbers!r}")

    stacks: Stacks = [[] for _ in labels]
    for layer in reversed(layers):
        # Rows may lose their trailing spaces.
        for i, crate in enumerate(layer[_CRATE_COLUMN::_STACK_PITCH]):
            if crate == " ":
                continue
            if i >= len(stacks):
                raise MalformedInputError(f"crate outside the numbered stacks: {layer!r}")
            if not ("A" <= crate <= "Z"):
                raise MalformedInputError(f"invalid crate {crate!r} in {layer!r}")
            stacks[i].append(crate)
    return stacks


def parse_move(line: str) -> Move:
    """Parse 'move Q from O to D'."""
    words = line.split(" ")
    if len(words) != 6 or words[0::2] != ["move", "from", "to"]:
        raise MalformedInputError(f"not a rearrangement step: {line!r}")
    return Move(
        parse_int(words[1], "crate quantity"),
        parse_int(words[3], "origin stack"),
        parse_int(words[5], "destination stack"),
    )


def apply_move(stacks: Stacks, move: Move, keep_order: bool = False) -> None:
    """Move crates between stacks in place.

    Args:
        stacks: Stacks, bottom crate first
        move: The step to apply
        keep_order: Move the block at once (part 2) instead of crate by crate

    Raises:
        MalformedInputError: If a stack number is out of range or the origin
            holds fewer crates than requested
    """
    for number in (move.origin, move.destination):
        if not 1 <= number <= len(stacks):
            raise MalformedInputError(f"no stack numbered {number}")
    source = stacks[move.origin - 1]
    if move.quantity > len(source):
        raise MalformedInputError(
            f"cannot move {move.quantity} crates from stack {move.origin} "
            f"holding {len(source)}"
        )
    if move.quantity == 0:
        return

    block = source[-move.quantity:]
    del source[-move.quantity:]
    if not keep_order:
        block.reverse()
    stacks[move.destination - 1].extend(block)


def top_crates(stacks: Stacks) -> str:
    """Top crate of each stack; an empty stack shows as a space."""
    return "".join(stack[-1] if stack else " " for stack in stacks)


def parse_supplies(lines: Iterable[str]) -> Tuple[Stacks, List[Move]]:
    lines = list(without_trailing_blanks(lines))
    try:
        split = lines.index("")
    except ValueError:
        raise MalformedInputError("no blank line after the crate diagram") from None
    stacks = parse_diagram(lines[:split])
    moves = [parse_move(line) for line in lines[split + 1:]]
    return stacks, moves


def rearrange(lines: Iterable[str], keep_order: bool = False) -> str:
    stacks, moves = parse_supplies(lines)
    for move in moves:
        apply_move(stacks, move, keep_order=keep_order)
    return top_crates(stacks)
