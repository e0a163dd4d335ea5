"""aocsolver - Daily text-puzzle solutions.

Each puzzle reads lines from stdin, applies a small parsing/arithmetic rule,
and prints one answer (a number, or the crate string for 2022-05).

Architecture:
- Streaming: lines are consumed in arrival order, one pass
- Fail-fast: unparseable input raises MalformedInputError; the CLI reports
  it and exits non-zero
- No persisted state, no concurrency

Modules:
- config: Version guards, symbol set, sentinels, dtypes
- types: Canonical dataclasses (Span, CubeSet, SectionRange, AxisSpan) and the error
- schematic: Engine schematic part numbers (2023-03)
- calibration, cubes: 2023-01, 2023-02
- calories, rockpaper, rucksack, cleanup, supplies, datastream: 2022-01 to 2022-06
- filesystem, forest, rope, cpu, monkeys, hills, packets, sand: 2022-07 to 2022-14
- harness: CLI runner
- utils: Line helpers
"""
from __future__ import annotations

# Version
__version__ = "0.1.0"

# Expose key types and functions at package level
from .types import Span, CubeSet, SectionRange, MalformedInputError
from .schematic import scan_for_number, clamped_slice, sum_part_numbers
from . import config

__all__ = [
    "Span",
    "CubeSet",
    "SectionRange",
    "MalformedInputError",
    "scan_for_number",
    "clamped_slice",
    "sum_part_numbers",
    "config",
]
