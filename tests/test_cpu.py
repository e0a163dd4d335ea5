"""CPU signal strength tests (2022-10)."""
import pytest

from aocsolver.cpu import parse_instruction, register_trace, sum_signal_strengths
from aocsolver.types import MalformedInputError

LARGER_PROGRAM = """\
addx 15
addx -11
addx 6
addx -3
addx 5
addx -1
addx -8
addx 13
addx 4
noop
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx 5
addx -1
addx -35
addx 1
addx 24
addx -19
addx 1
addx 16
addx -11
noop
noop
addx 21
addx -15
noop
noop
addx -3
addx 9
addx 1
addx -3
addx 8
addx 1
addx 5
noop
noop
noop
noop
noop
addx -36
noop
addx 1
addx 7
noop
noop
noop
addx 2
addx 6
noop
noop
noop
noop
noop
addx 1
noop
noop
addx 7
addx 1
noop
addx -13
addx 13
addx 7
noop
addx 1
addx -33
noop
noop
noop
addx 2
noop
noop
noop
addx 8
noop
addx -1
addx 2
addx 1
noop
addx 17
addx -9
addx 1
addx 1
addx -3
addx 11
noop
noop
addx 1
noop
addx 1
noop
noop
addx -13
addx -19
addx 1
addx 3
addx 26
addx -30
addx 12
addx -1
addx 3
addx 1
noop
noop
noop
addx -9
addx 18
addx 1
addx 2
noop
noop
addx 9
noop
noop
noop
addx -1
addx 2
addx -37
addx 1
addx 3
noop
addx 15
addx -21
addx 22
addx -6
addx 1
noop
addx 2
addx 1
noop
addx -10
noop
noop
addx 20
addx 1
addx 2
addx 2
addx -6
addx -11
noop
noop
noop
""".splitlines()


def test_parse_instruction():
    assert parse_instruction("noop") == ("noop", None)
    assert parse_instruction("addx 15") == ("addx", 15)
    assert parse_instruction("addx -11") == ("addx", -11)


@pytest.mark.parametrize("line", ["noop 1", "addx", "addx +3", "addx 1 2", "mul 3"])
def test_malformed_instructions(line):
    with pytest.raises(MalformedInputError):
        parse_instruction(line)


def test_small_program_trace():
    trace = list(register_trace(["noop", "addx 3", "addx -5"]))
    assert trace == [(1, 1), (2, 1), (3, 1), (4, 4), (5, 4)]


def test_register_sampled_during_cycle():
    trace = dict(register_trace(LARGER_PROGRAM))
    assert trace[20] == 21
    assert trace[60] == 19
    assert trace[220] == 18


def test_larger_program():
    assert sum_signal_strengths(LARGER_PROGRAM) == 13140


def test_short_program_has_no_samples():
    assert sum_signal_strengths(["noop", "addx 3"]) == 0
