"""harness.py - CLI runner for the daily puzzle routines.

Reads the puzzle input from stdin and prints a single answer to stdout.
Diagnostics go to stderr.

Usage:
    python -m aocsolver.harness 2023-03 < input.txt
    aocsolver 2022-06 --part 2 < input.txt
    aocsolver 2023-02 --cube-limits 12 13 14 < input.txt

Flags:
    --part: Which half of the puzzle to answer (default: 1)
    --cube-limits: Red, green, blue bag limits (2023-02 only)
    --verbose: Trace per-number / per-game decisions on stderr
"""
from __future__ import annotations
import argparse
import sys
from typing import Callable, Dict, Iterable, Iterator, Union
from . import calibration
from . import calories
from . import cleanup
from . import cpu
from . import cubes
from . import datastream
from . import filesystem
from . import forest
from . import hills
from . import monkeys
from . import packets
from . import rockpaper
from . import rope
from . import rucksack
from . import sand
from . import schematic
from . import supplies
from .config import DEFAULT_CUBE_LIMITS
from .types import CubeSet, MalformedInputError

Answer = Union[int, str]
Runner = Callable[[Iterable[str], argparse.Namespace], Answer]


# ============================================================================
# Puzzle runners (one per puzzle id and part)
# ============================================================================
def run_2022_01(lines: Iterable[str], args: argparse.Namespace) -> int:
    return calories.max_group_calories(lines)


def run_2022_02(lines: Iterable[str], args: argparse.Namespace) -> int:
    return rockpaper.total_score(lines)


def run_2022_02_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return rockpaper.total_planned_score(lines)


def run_2022_03(lines: Iterable[str], args: argparse.Namespace) -> int:
    return rucksack.sum_duplicate_priorities(lines)


def run_2022_03_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return rucksack.sum_badge_priorities(lines)


def run_2022_04(lines: Iterable[str], args: argparse.Namespace) -> int:
    return cleanup.count_contained_pairs(lines)


def run_2022_04_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return cleanup.count_overlapping_pairs(lines)


def run_2022_05(lines: Iterable[str], args: argparse.Namespace) -> str:
    return supplies.rearrange(lines)


def run_2022_05_part2(lines: Iterable[str], args: argparse.Namespace) -> str:
    return supplies.rearrange(lines, keep_order=True)


def run_2022_06(lines: Iterable[str], args: argparse.Namespace) -> int:
    return datastream.first_marker(lines)


def run_2022_06_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return datastream.first_message_marker(lines)


def run_2022_07(lines: Iterable[str], args: argparse.Namespace) -> int:
    return filesystem.sum_small_directories(lines)


def run_2022_07_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return filesystem.smallest_deletion(lines)


def run_2022_08(lines: Iterable[str], args: argparse.Namespace) -> int:
    return forest.max_scenic_score(lines)


def run_2022_09(lines: Iterable[str], args: argparse.Namespace) -> int:
    return rope.count_tail_positions(lines)


def run_2022_10(lines: Iterable[str], args: argparse.Namespace) -> int:
    return cpu.sum_signal_strengths(lines)


def run_2022_11(lines: Iterable[str], args: argparse.Namespace) -> int:
    return monkeys.monkey_business(lines)


def run_2022_12(lines: Iterable[str], args: argparse.Namespace) -> int:
    return hills.fewest_steps(lines)


def run_2022_12_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return hills.fewest_steps_from_lowest(lines)


def run_2022_13(lines: Iterable[str], args: argparse.Namespace) -> int:
    return packets.sum_ordered_pair_indices(lines)


def run_2022_13_part2(lines: Iterable[str], args: argparse.Namespace) -> int:
    return packets.decoder_key(lines)


def run_2022_14(lines: Iterable[str], args: argparse.Namespace) -> int:
    return sand.count_resting_sand(lines)


def run_2023_01(lines: Iterable[str], args: argparse.Namespace) -> int:
    return calibration.sum_calibration_values(lines)


def run_2023_02(lines: Iterable[str], args: argparse.Namespace) -> int:
    limits = CubeSet(*args.cube_limits)
    return cubes.sum_possible_game_ids(lines, limits, verbose=args.verbose)


def run_2023_03(lines: Iterable[str], args: argparse.Namespace) -> int:
    return schematic.sum_part_numbers(lines, verbose=args.verbose)


# Extend-only registry: puzzle id -> part -> runner
PUZZLE_RUNNERS: Dict[str, Dict[int, Runner]] = {
    "2022-01": {1: run_2022_01},
    "2022-02": {1: run_2022_02, 2: run_2022_02_part2},
    "2022-03": {1: run_2022_03, 2: run_2022_03_part2},
    "2022-04": {1: run_2022_04, 2: run_2022_04_part2},
    "2022-05": {1: run_2022_05, 2: run_2022_05_part2},
    "2022-06": {1: run_2022_06, 2: run_2022_06_part2},
    "2022-07": {1: run_2022_07, 2: run_2022_07_part2},
    "2022-08": {1: run_2022_08},
    "2022-09": {1: run_2022_09},
    "2022-10": {1: run_2022_10},
    "2022-11": {1: run_2022_11},
    "2022-12": {1: run_2022_12, 2: run_2022_12_part2},
    "2022-13": {1: run_2022_13, 2: run_2022_13_part2},
    "2022-14": {1: run_2022_14},
    "2023-01": {1: run_2023_01},
    "2023-02": {1: run_2023_02},
    "2023-03": {1: run_2023_03},
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocsolver",
        description="Daily puzzle solutions (stdin -> one answer on stdout)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sum the part numbers of an engine schematic
  python -m aocsolver.harness 2023-03 < schematic.txt

  # Start-of-message marker instead of start-of-packet
  python -m aocsolver.harness 2022-06 --part 2 < datastream.txt

  # Sum ids of possible games with custom bag limits
  python -m aocsolver.harness 2023-02 --cube-limits 12 13 14 < games.txt
        """,
    )
    parser.add_argument(
        "puzzle",
        choices=sorted(PUZZLE_RUNNERS),
        help="Puzzle id as YEAR-DAY",
    )
    parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        default=1,
        help="Puzzle part (default: %(default)s)",
    )
    parser.add_argument(
        "--cube-limits",
        type=int,
        nargs=3,
        metavar=("RED", "GREEN", "BLUE"),
        default=list(DEFAULT_CUBE_LIMITS),
        help="Bag limits for 2023-02 (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Trace decisions on stderr",
    )
    return parser


def iter_lines(raw_lines: Iterable[str]) -> Iterator[str]:
    """Yield input lines without their line terminator ('\\n' or '\\r\\n')."""
    for line in raw_lines:
        yield line.rstrip("\r\n")


def run_puzzle(
    puzzle: str, raw_lines: Iterable[str], args: argparse.Namespace
) -> Answer:
    """Run one puzzle part over raw input lines and return its answer.

    Raises:
        MalformedInputError: Propagated from the puzzle's parsers
    """
    runner = PUZZLE_RUNNERS[puzzle][args.part]
    return runner(iter_lines(raw_lines), args)


def main(argv=None) -> None:
    """CLI entry point for harness."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.part not in PUZZLE_RUNNERS[args.puzzle]:
        parser.error(f"puzzle {args.puzzle} has no part {args.part}")

    try:
        answer = run_puzzle(args.puzzle, sys.stdin, args)
    except (MalformedInputError, UnicodeDecodeError) as e:
        print(f"[harness] {args.puzzle}: malformed input: {e}", file=sys.stderr)
        sys.exit(1)

    print(answer)


if __name__ == "__main__":
    main()
