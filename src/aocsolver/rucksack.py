"""rucksack.py - Rucksack reorganization (2022 day 3).

Part 1 scores the item shared by the two halves of each rucksack. Part 2
scores the badge: the item shared by each group of three rucksacks.
"""
from __future__ import annotations
import math
from typing import Iterable, Iterator, List
from .config import GROUP_SIZE
from .types import MalformedInputError
from .utils.lines import without_trailing_blanks


def item_priority(item: str) -> int:
    """a..z -> 1..26, A..Z -> 27..52."""
    if len(item) == 1 and "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if len(item) == 1 and "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise MalformedInputError(
        f"couldn't prioritize item, invalid character: {item!r}"
    )


def duplicate_item(rucksack: str) -> str:
    """Return the smallest item found in both compartments.

    The first compartment takes the extra item of an odd-length line.
    """
    mid = math.ceil(len(rucksack) / 2)
    common = set(rucksack[:mid]) & set(rucksack[mid:])
    if not common:
        raise MalformedInputError(f"found a rucksack without a duplicate: {rucksack!r}")
    return min(common)


def chunk_as_threes(lines: Iterable[str]) -> Iterator[List[str]]:
    """Yield consecutive groups of GROUP_SIZE lines.

    Notes:
        An incomplete final group is dropped.
    """
    group: List[str] = []
    for line in lines:
        group.append(line)
        if len(group) == GROUP_SIZE:
            yield group
            group = []


def badge_item(group: List[str]) -> str:
    """Return the smallest item carried by every rucksack in the group."""
    common = set(group[0])
    for rucksack in group[1:]:
        common &= set(rucksack)
    if not common:
        raise MalformedInputError(f"found a group without a badge: {group!r}")
    return min(common)


def sum_duplicate_priorities(lines: Iterable[str]) -> int:
    return sum(
        item_priority(duplicate_item(line)) for line in without_trailing_blanks(lines)
    )


def sum_badge_priorities(lines: Iterable[str]) -> int:
    return sum(
        item_priority(badge_item(group))
        for group in chunk_as_threes(without_trailing_blanks(lines))
    )
