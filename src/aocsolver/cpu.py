"""cpu.py - Cathode-ray tube signal strength (2022 day 10).

A one-register CPU runs `noop` (one cycle) and `addx V` (two cycles,
then X += V). X starts at 1. Signal strength is cycle * X, sampled during
cycles 20, 60, 100, ...
"""
from __future__ import annotations
from typing import Iterable, Iterator, Optional, Tuple
from .config import (
    ADDX_CYCLES,
    FIRST_SAMPLE_CYCLE,
    NOOP_CYCLES,
    SAMPLE_INTERVAL,
)
from .types import MalformedInputError
from .utils.lines import parse_int, without_trailing_blanks

Instruction = Tuple[str, Optional[int]]


def parse_instruction(line: str) -> Instruction:
    words = line.split(" ")
    if words == ["noop"]:
        return "noop", None
    if len(words) == 2 and words[0] == "addx":
        return "addx", parse_int(words[1], "addx operand", signed=True)
    raise MalformedInputError(f"unknown instruction: {line!r}")


def register_trace(lines: Iterable[str]) -> Iterator[Tuple[int, int]]:
    """Yield (cycle, X during that cycle) for every cycle of the program."""
    x = 1
    cycle = 0
    for line in without_trailing_blanks(lines):
        op, value = parse_instruction(line)
        for _ in range(ADDX_CYCLES if op == "addx" else NOOP_CYCLES):
            cycle += 1
            yield cycle, x
        if value is not None:
            x += value


def sum_signal_strengths(lines: Iterable[str]) -> int:
    return sum(
        cycle * x
        for cycle, x in register_trace(lines)
        if cycle >= FIRST_SAMPLE_CYCLE
        and (cycle - FIRST_SAMPLE_CYCLE) % SAMPLE_INTERVAL == 0
    )
