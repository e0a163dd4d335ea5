"""Rock paper scissors tests (2022-02)."""
import pytest

from aocsolver.rockpaper import (
    hand_for_outcome,
    outcome_score,
    planned_round_score,
    read_hand,
    round_score,
    total_planned_score,
    total_score,
)
from aocsolver.types import MalformedInputError


def test_read_hand():
    assert read_hand("A") == read_hand("X") == 1
    assert read_hand("B") == read_hand("Y") == 2
    assert read_hand("C") == read_hand("Z") == 3


def test_outcomes():
    assert outcome_score(2, 1) == 6  # paper beats rock
    assert outcome_score(1, 3) == 6  # rock beats scissors
    assert outcome_score(3, 2) == 6  # scissors beat paper
    assert outcome_score(1, 2) == 0
    assert outcome_score(3, 3) == 3


def test_round_scores():
    assert round_score("A Y") == 8
    assert round_score("B X") == 1
    assert round_score("C Z") == 6


def test_example_total():
    assert total_score(["A Y", "B X", "C Z", ""]) == 15


@pytest.mark.parametrize("line", ["A", "A Y Z", "D X", "A W"])
def test_malformed_rounds(line):
    with pytest.raises(MalformedInputError):
        round_score(line)


def test_hand_for_outcome():
    assert hand_for_outcome(1, 3) == 1  # draw against rock
    assert hand_for_outcome(1, 6) == 2  # paper beats rock
    assert hand_for_outcome(1, 0) == 3  # scissors lose to rock
    assert hand_for_outcome(3, 6) == 1
    assert hand_for_outcome(2, 0) == 1


def test_planned_round_scores():
    assert planned_round_score("A Y") == 4
    assert planned_round_score("B X") == 1
    assert planned_round_score("C Z") == 7


def test_example_planned_total():
    assert total_planned_score(["A Y", "B X", "C Z"]) == 12


@pytest.mark.parametrize("line", ["A", "A W", "D Y"])
def test_malformed_planned_rounds(line):
    with pytest.raises(MalformedInputError):
        planned_round_score(line)
