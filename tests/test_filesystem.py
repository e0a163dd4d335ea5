"""Directory size tests (2022-07)."""
import pytest

from aocsolver.filesystem import (
    directory_sizes,
    reconstruct_from_history,
    smallest_deletion,
    sum_small_directories,
)
from aocsolver.types import MalformedInputError

TRANSCRIPT = [
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
]


def test_reconstruct_tree():
    root = reconstruct_from_history(TRANSCRIPT)
    assert sorted(root.children) == ["a", "d"]
    assert root.files == {"b.txt": 14848514, "c.dat": 8504156}
    assert root.children["a"].children["e"].files == {"i": 584}


def test_directory_sizes():
    sizes = directory_sizes(reconstruct_from_history(TRANSCRIPT))
    assert sizes[0] == 48381165
    assert sorted(sizes) == [584, 94853, 24933642, 48381165]


def test_example_small_directories():
    assert sum_small_directories(TRANSCRIPT) == 95437


def test_example_smallest_deletion():
    assert smallest_deletion(TRANSCRIPT) == 24933642


def test_cd_root_resets_path():
    root = reconstruct_from_history(
        ["$ ls", "dir a", "$ cd a", "$ cd /", "$ ls", "10 x"]
    )
    assert root.files == {"x": 10}
    assert root.children["a"].files == {}


def test_repeated_listing_is_not_double_counted():
    transcript = ["$ cd /", "$ ls", "10 x", "$ ls", "10 x"]
    assert directory_sizes(reconstruct_from_history(transcript)) == [10]


@pytest.mark.parametrize(
    "transcript, message",
    [
        (["$ cd .."], "root"),
        (["$ cd nowhere"], "no directory named"),
        (["10 x"], "outside ls output"),
        (["$ ls", "10 x", "$ cd /", "20 y"], "outside ls output"),
        (["$ rm -rf"], "unknown command"),
        (["$ ls", "dir"], "not a directory entry"),
        (["$ ls", "ten x"], "file size"),
    ],
)
def test_malformed_transcripts(transcript, message):
    with pytest.raises(MalformedInputError, match=message):
        reconstruct_from_history(transcript)

