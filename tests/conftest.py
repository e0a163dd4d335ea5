"""Shared fixtures for the puzzle tests."""
import pytest


SCHEMATIC_EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


@pytest.fixture
def schematic_lines():
    return list(SCHEMATIC_EXAMPLE)
