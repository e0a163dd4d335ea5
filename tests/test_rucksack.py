"""Rucksack tests (2022-03)."""
import pytest

from aocsolver.rucksack import (
    badge_item,
    chunk_as_threes,
    duplicate_item,
    item_priority,
    sum_badge_priorities,
    sum_duplicate_priorities,
)
from aocsolver.types import MalformedInputError

RUCKSACKS = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


def test_item_priority():
    assert item_priority("p") == 16
    assert item_priority("L") == 38
    assert item_priority("P") == 42
    assert item_priority("v") == 22
    assert item_priority("t") == 20
    assert item_priority("s") == 19
    assert item_priority("a") == 1
    assert item_priority("Z") == 52


@pytest.mark.parametrize("item", ["1", "-", "é", ""])
def test_item_priority_rejects_non_letters(item):
    with pytest.raises(MalformedInputError):
        item_priority(item)


def test_duplicate_item():
    assert duplicate_item(RUCKSACKS[0]) == "p"


def test_duplicate_item_picks_smallest():
    assert duplicate_item("abba") == "a"


def test_example_sum():
    assert sum_duplicate_priorities(RUCKSACKS) == 157


def test_rucksack_without_duplicate():
    with pytest.raises(MalformedInputError, match="without a duplicate"):
        duplicate_item("abcd")


def test_chunk_as_threes_drops_incomplete_group():
    assert list(chunk_as_threes(["a", "b", "c", "d", "e"])) == [["a", "b", "c"]]
    assert list(chunk_as_threes([])) == []


def test_badge_item():
    assert badge_item(RUCKSACKS[:3]) == "r"
    assert badge_item(RUCKSACKS[3:]) == "Z"


def test_example_badge_sum():
    assert sum_badge_priorities(RUCKSACKS) == 70


def test_group_without_badge():
    with pytest.raises(MalformedInputError, match="without a badge"):
        badge_item(["ab", "bc", "cd"])
