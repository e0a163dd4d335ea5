"""filesystem.py - No space left on device (2022 day 7).

Rebuilds a directory tree from a terminal transcript of `cd` and `ls`
commands, then sizes every directory. A directory's size is the total of
all files below it.

Part 1 sums the sizes of directories no larger than SMALL_DIR_LIMIT.
Part 2 finds the smallest directory whose deletion frees enough space.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List
from .config import DISK_SIZE, SMALL_DIR_LIMIT, SPACE_NEEDED
from .types import MalformedInputError
from .utils.lines import parse_int, without_trailing_blanks

ROOT = "/"
PARENT = ".."


@dataclass
class Directory:
    """A directory in the rebuilt tree.

    Attributes:
        children: Subdirectories by name
        files: File sizes by name
    """

    children: Dict[str, "Directory"] = field(default_factory=dict)
    files: Dict[str, int] = field(default_factory=dict)


def _change_directory(path: List[Directory], root: Directory, name: str) -> None:
    if name == ROOT:
        path[:] = [root]
    elif name == PARENT:
        if len(path) == 1:
            raise MalformedInputError("cannot leave the root directory")
        path.pop()
    else:
        try:
            path.append(path[-1].children[name])
        except KeyError:
            raise MalformedInputError(f"no directory named {name!r} here") from None


def reconstruct_from_history(lines: Iterable[str]) -> Directory:
    """Replay a terminal transcript and return the root directory.

    Lines are `$ cd <name>`, `$ ls`, or one `ls` output entry:
    `dir <name>` or `<size> <name>`.

    Raises:
        MalformedInputError: On unknown commands, entries outside `ls`
            output, or `cd` into a directory not listed yet
    """
    root = Directory()
    path = [root]
    listing = False
    for line in without_trailing_blanks(lines):
        words = line.split(" ")
        if words[0] == "$":
            listing = False
            if words[1:] == ["ls"]:
                listing = True
            elif len(words) == 3 and words[1] == "cd":
                _change_directory(path, root, words[2])
            else:
                raise MalformedInputError(f"unknown command: {line!r}")
            continue

        if not listing:
            raise MalformedInputError(f"entry outside ls output: {line!r}")
        if len(words) != 2:
            raise MalformedInputError(f"not a directory entry: {line!r}")
        kind, name = words
        cwd = path[-1]
        if kind == "dir":
            cwd.children.setdefault(name, Directory())
        else:
            cwd.files[name] = parse_int(kind, "file size")
    return root


def directory_sizes(root: Directory) -> List[int]:
    """Total size of every directory, root first."""
    sizes: List[int] = []

    def visit(directory: Directory) -> int:
        slot = len(sizes)
        sizes.append(0)
        total = sum(directory.files.values())
        for child in directory.children.values():
            total += visit(child)
        sizes[slot] = total
        return total

    visit(root)
    return sizes


def sum_small_directories(lines: Iterable[str]) -> int:
    sizes = directory_sizes(reconstruct_from_history(lines))
    return sum(size for size in sizes if size <= SMALL_DIR_LIMIT)


def smallest_deletion(lines: Iterable[str]) -> int:
    """Size of the smallest directory that frees enough space.

    Notes:
        A candidate must be strictly larger than the space still missing.
        The root always qualifies.
    """
    sizes = directory_sizes(reconstruct_from_history(lines))
    missing = SPACE_NEEDED - (DISK_SIZE - sizes[0])
    return min(size for size in sizes if size > missing)
