"""Line helper tests."""
import pytest

from aocsolver.types import MalformedInputError
from aocsolver.utils.lines import parse_int, parse_pair, split_blocks, without_trailing_blanks


def test_without_trailing_blanks_keeps_interior_blanks():
    assert list(without_trailing_blanks(["a", "", "b", "", ""])) == ["a", "", "b"]
    assert list(without_trailing_blanks(["", ""])) == []


def test_split_blocks():
    lines = ["", "a", "b", "", "", "c", ""]
    assert list(split_blocks(lines)) == [["a", "b"], ["c"]]
    assert list(split_blocks([])) == []


def test_parse_pair():
    assert parse_pair("2-4", "-") == ("2", "4")
    with pytest.raises(MalformedInputError, match="could not use separator"):
        parse_pair("2-4-6", "-")


def test_parse_int():
    assert parse_int("0", "n") == 0
    assert parse_int("0042", "n") == 42
    assert parse_int("-3", "n", signed=True) == -3


@pytest.mark.parametrize("token", ["1_000", " 7 ", "7 ", "+7", "-3", "", "٣", "1.5", "x"])
def test_parse_int_rejects_loose_forms(token):
    with pytest.raises(MalformedInputError, match="count is not an integer"):
        parse_int(token, "count")


@pytest.mark.parametrize("token", ["-", "--3", "+3", " -3", "-3_0"])
def test_parse_int_signed_rejects_loose_forms(token):
    with pytest.raises(MalformedInputError):
        parse_int(token, "offset", signed=True)
