"""lines.py - Small helpers for line-oriented puzzle input."""
from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple
from ..types import MalformedInputError


def without_trailing_blanks(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines unchanged, dropping blank lines at the end of input.

    Interior blank lines are kept; they are only released once a later
    non-blank line shows they are not trailing.
    """
    pending = 0
    for line in lines:
        if line == "":
            pending += 1
            continue
        for _ in range(pending):
            yield ""
        pending = 0
        yield line


def split_blocks(lines: Iterable[str]) -> Iterator[List[str]]:
    """Yield runs of non-blank lines separated by one or more blank lines."""
    block: List[str] = []
    for line in lines:
        if line == "":
            if block:
                yield block
            block = []
            continue
        block.append(line)
    if block:
        yield block


def parse_pair(text: str, separator: str) -> Tuple[str, str]:
    """Split text on separator into exactly two parts.

    Raises:
        MalformedInputError: If the split does not produce two parts
    """
    parts = text.split(separator)
    if len(parts) != 2:
        raise MalformedInputError(
            f"could not use separator {separator!r} to split into two values: {text!r}"
        )
    return parts[0], parts[1]


def parse_int(token: str, what: str, signed: bool = False) -> int:
    """Parse a plain decimal integer token.

    Only ASCII digits are accepted, with a leading '-' when `signed`.
    Whitespace, '+' and '_' separators are rejected even though int()
    would take them.

    Raises:
        MalformedInputError: If token is not an integer of that form
    """
    digits = token[1:] if signed and token.startswith("-") else token
    if not (digits.isascii() and digits.isdigit()):
        raise MalformedInputError(f"{what} is not an integer: {token!r}")
    return int(token)
