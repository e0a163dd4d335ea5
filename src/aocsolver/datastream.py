"""datastream.py - Tuning trouble markers (2022 day 6).

A marker ends at the first position where the last `length` characters
are all different: 4 for start-of-packet, 14 for start-of-message.
"""
from __future__ import annotations
from typing import Iterable
from .config import MARKER_LENGTH, MESSAGE_MARKER_LENGTH
from .types import MalformedInputError


def find_marker(stream: str, length: int = MARKER_LENGTH) -> int:
    """Return the number of characters read when the last `length` are distinct.

    Raises:
        MalformedInputError: If no such window exists
    """
    for i in range(length, len(stream) + 1):
        if len(set(stream[i - length:i])) == length:
            return i
    raise MalformedInputError(f"no marker of length {length}")


def first_marker(lines: Iterable[str], length: int = MARKER_LENGTH) -> int:
    """Find the marker in the datastream (all input lines joined)."""
    return find_marker("".join(lines), length)


def first_message_marker(lines: Iterable[str]) -> int:
    return first_marker(lines, MESSAGE_MARKER_LENGTH)
