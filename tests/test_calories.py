"""Calorie counting tests (2022-01)."""
import pytest

from aocsolver.calories import max_group_calories
from aocsolver.types import MalformedInputError

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000""".split("\n")


def test_example_max():
    assert max_group_calories(EXAMPLE) == 24000


def test_last_group_counts():
    assert max_group_calories(["1", "", "5", "6"]) == 11


def test_empty_input():
    assert max_group_calories([]) == 0


def test_non_integer_is_malformed():
    with pytest.raises(MalformedInputError, match="calories"):
        max_group_calories(["100", "lots"])


def test_negative_is_malformed():
    with pytest.raises(MalformedInputError, match="calories is not an integer"):
        max_group_calories(["-5"])
