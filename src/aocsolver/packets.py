"""packets.py - Distress signal packet ordering (2022 day 13).

Packets are nested lists of non-negative integers, written as JSON
arrays. Ordering:
- two integers compare numerically
- an integer against a list is wrapped as a one-item list
- two lists compare item by item, then by length

Part 1 sums the 1-based indices of the pairs already in order. Part 2
sorts all packets together with the two divider packets and multiplies
the dividers' 1-based positions.
"""
from __future__ import annotations
import json
from functools import cmp_to_key
from typing import Iterable, List, Union
from .config import DIVIDER_PACKETS
from .types import MalformedInputError
from .utils.lines import split_blocks

Packet = Union[int, List["Packet"]]


def _check_packet(value, line: str) -> None:
    if isinstance(value, list):
        for item in value:
            _check_packet(item, line)
    elif isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MalformedInputError(f"packet item is not a non-negative integer: {line!r}")


def parse_packet(line: str) -> List[Packet]:
    """Parse one packet line.

    Raises:
        MalformedInputError: If the line is not a list of lists and
            non-negative integers
    """
    try:
        value = json.loads(line)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"unreadable packet {line!r}: {e.msg}") from e
    if not isinstance(value, list):
        raise MalformedInputError(f"packet is not a list: {line!r}")
    _check_packet(value, line)
    return value


def compare_packets(left: Packet, right: Packet) -> int:
    """Return -1 if left sorts first, 1 if right does, 0 if neither."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        order = compare_packets(a, b)
        if order:
            return order
    return (len(left) > len(right)) - (len(left) < len(right))


def sum_ordered_pair_indices(lines: Iterable[str]) -> int:
    total = 0
    for index, block in enumerate(split_blocks(lines), start=1):
        if len(block) != 2:
            raise MalformedInputError(f"packet pair {index} has {len(block)} packets")
        if compare_packets(parse_packet(block[0]), parse_packet(block[1])) < 0:
            total += index
    return total


def decoder_key(lines: Iterable[str]) -> int:
    packets = [parse_packet(line) for line in lines if line != ""]
    packets.extend(DIVIDER_PACKETS)
    packets.sort(key=cmp_to_key(compare_packets))
    key = 1
    for divider in DIVIDER_PACKETS:
        key *= packets.index(divider) + 1
    return key
