"""config.py - Version guards, constants, dtypes.

Enforces:
- Minimum runtime versions (Python 3.9, numpy 1.24, scipy 1.10)
- Fixed symbol set, sentinels and dtypes shared by the puzzle modules
"""
from __future__ import annotations
import sys
import numpy as np


# ============================================================================
# Version requirements
# ============================================================================
REQUIRED_VERSIONS = {
    "python_major_minor": (3, 9),
    "numpy": (1, 24),  # accept >= 1.24
    "scipy": (1, 10),  # accept >= 1.10
}


def _version_tuple(version: str) -> tuple:
    parts = []
    for piece in version.split(".")[:2]:
        digits = "".join(ch for ch in piece if ch.isdigit())
        parts.append(int(digits or 0))
    return tuple(parts)


def _assert_versions() -> None:
    """Assert library versions meet the minimums."""
    import scipy

    py_ver = sys.version_info
    req_py = REQUIRED_VERSIONS["python_major_minor"]
    if (py_ver.major, py_ver.minor) < req_py:
        raise RuntimeError(
            f"Python must be >= {req_py[0]}.{req_py[1]}, "
            f"got {py_ver.major}.{py_ver.minor}.{py_ver.micro}"
        )

    req_np = REQUIRED_VERSIONS["numpy"]
    if _version_tuple(np.__version__) < req_np:
        raise RuntimeError(
            f"numpy must be >= {req_np[0]}.{req_np[1]}, got {np.__version__}"
        )

    req_sp = REQUIRED_VERSIONS["scipy"]
    if _version_tuple(scipy.__version__) < req_sp:
        raise RuntimeError(
            f"scipy must be >= {req_sp[0]}.{req_sp[1]}, got {scipy.__version__}"
        )


_assert_versions()


# ============================================================================
# Schematic scanner (2023 day 3)
# ============================================================================

# Literal membership only; other non-digit, non-'.' characters do not count.
SYMBOLS = frozenset("#$%&*+-/=@")
DIGITS = "0123456789"
NOT_FOUND = -1  # span sentinel: (NOT_FOUND, NOT_FOUND)


# ============================================================================
# Sibling puzzles
# ============================================================================

# 2023 day 2: red, green, blue
CUBE_COLORS = ("red", "green", "blue")
DEFAULT_CUBE_LIMITS = (12, 13, 14)

# 2022 day 2: hand letters -> hand value
HAND_VALUES = {
    "A": 1, "X": 1,  # rock
    "B": 2, "Y": 2,  # paper
    "C": 3, "Z": 3,  # scissors
}
WIN_SCORE = 6
DRAW_SCORE = 3
LOSS_SCORE = 0
# part 2: second column is the desired outcome
OUTCOME_SCORES = {"X": LOSS_SCORE, "Y": DRAW_SCORE, "Z": WIN_SCORE}

# 2022 day 3 part 2: elves per badge group
GROUP_SIZE = 3

# 2022 day 6
MARKER_LENGTH = 4  # start-of-packet
MESSAGE_MARKER_LENGTH = 14  # start-of-message

# 2022 day 7
DISK_SIZE = 70_000_000
SPACE_NEEDED = 30_000_000
SMALL_DIR_LIMIT = 100_000

# 2022 day 9
ROPE_KNOTS = 2
HEADINGS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}

# 2022 day 10: signal sampled at cycles 20, 60, 100, ...
FIRST_SAMPLE_CYCLE = 20
SAMPLE_INTERVAL = 40
ADDX_CYCLES = 2
NOOP_CYCLES = 1

# 2022 day 11
MONKEY_ROUNDS = 20
WORRY_RELIEF = 3
BUSIEST_MONKEYS = 2

# 2022 day 12
START_MARK = "S"
END_MARK = "E"
LOWEST_ELEVATION = "a"
HIGHEST_ELEVATION = "z"
MAX_CLIMB = 1

# 2022 day 13
DIVIDER_PACKETS = ([[2]], [[6]])

# 2022 day 14
SAND_SOURCE = (500, 0)

# Dtypes
GRID_DTYPE = np.int32  # tree heights, elevations
INT_DTYPE = np.int64  # distances, scores, indices
