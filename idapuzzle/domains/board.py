from __future__ import annotations
from typing import Dict, List, Sequence, Tuple
import math
import random

from idapuzzle.heuristics.misplaced import misplaced

Board = Tuple[int, ...]  # side*side tuple, 0 is the blank, goal is (0, 1, ..., n-1)

#  .---.
#  |2|0|
#  .---.  -> (2, 0, 1, 3)
#  |1|3|
#  .---.

# Boards hard-coded by the reference solver runs (goal has the blank top-left)
REFERENCE_BOARDS: Dict[str, Board] = {
    "c0":   (4, 8, 3, 2, 0, 7, 6, 5, 1),
    "c0b":  (3, 2, 5, 4, 1, 8, 6, 7, 0),
    "hard": (11, 5, 12, 14, 15, 2, 0, 9, 13, 7, 6, 1, 3, 10, 4, 8),
    "p15b": (15, 2, 12, 11, 14, 13, 9, 5, 1, 3, 8, 7, 0, 10, 6, 4),
    "p33":  (10, 0, 2, 4, 5, 1, 6, 12, 11, 13, 9, 7, 15, 3, 14, 8),
    "p35":  (14, 1, 9, 6, 4, 8, 12, 5, 7, 2, 3, 0, 10, 11, 13, 15),
    "c1":   (7, 11, 8, 3, 14, 0, 6, 15, 1, 4, 13, 9, 5, 12, 2, 10),
    "c2":   (14, 10, 9, 4, 13, 6, 5, 8, 2, 12, 7, 0, 1, 3, 11, 15),
}


class InvalidBoard(ValueError):
    """Raised when a board is not a permutation of 0..side*side-1."""


def side(board: Sequence[int]) -> int:
    """Side length of the (square) board. Length is assumed to be a perfect square."""
    return math.isqrt(len(board))


def goal(n: int) -> Board:
    return tuple(range(n * n))


def blank_index(board: Sequence[int]) -> int:
    return board.index(0)


def slide_candidates(board: Sequence[int]) -> List[Board]:
    """Boards one slide away, in order right, left, down, up.

    Row-edge checks keep the blank from wrapping onto the neighbouring row.
    """
    s = side(board)
    n = len(board)
    p = blank_index(board)
    targets: List[int] = []
    if p + 1 < n and (p + 1) % s != 0:
        targets.append(p + 1)
    if p - 1 >= 0 and (p - 1) % s != s - 1:
        targets.append(p - 1)
    if p + s < n:
        targets.append(p + s)
    if p - s >= 0:
        targets.append(p - s)
    out: List[Board] = []
    for j in targets:
        lst = list(board)
        lst[p], lst[j] = lst[j], lst[p]
        out.append(tuple(lst))
    return out


def is_goal(board: Sequence[int]) -> bool:
    # misplaced count is the cheapest exact test, whatever heuristic drives the search
    return misplaced(board) == 0


def validate_board(board: Sequence[int]) -> Board:
    """Return `board` as a tuple or raise InvalidBoard."""
    cells = tuple(board)
    n = len(cells)
    s = math.isqrt(n)
    if s * s != n:
        raise InvalidBoard(f"board length {n} is not a perfect square")
    if s < 2:
        raise InvalidBoard(f"board side must be >= 2, got {s}")
    for x in cells:
        if isinstance(x, bool) or not isinstance(x, int):
            raise InvalidBoard(f"board entries must be ints, got {x!r}")
    if sorted(cells) != list(range(n)):
        missing = sorted(set(range(n)) - set(cells))
        raise InvalidBoard(f"board must be a permutation of 0..{n - 1} (missing {missing})")
    return cells


def _inversions(cells: Sequence[int]) -> int:
    inv = 0
    for i in range(len(cells)):
        for j in range(i + 1, len(cells)):
            if cells[i] > cells[j]:
                inv += 1
    return inv


def is_solvable(board: Sequence[int]) -> bool:
    """Reachability of the identity goal.

    Every slide is a transposition (flips the permutation parity) and moves
    the blank one cell (flips the parity of its row+col distance to the
    top-left corner). The two parities therefore agree on every board
    reachable from the goal, and only there. Holds for odd and even sides.
    """
    s = side(board)
    r, c = divmod(blank_index(board), s)
    return (_inversions(board) % 2) == ((r + c) % 2)


def scramble(n: int, depth: int, seed: int) -> Board:
    """Scramble the goal with `depth` random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = goal(n)
    prev = None
    for _ in range(depth):
        cand = slide_candidates(s)
        if prev in cand and len(cand) > 1:
            cand.remove(prev)
        prev = s
        s = rng.choice(cand)
    return s


def make_unsolvable_variant(board: Sequence[int]) -> Board:
    """Swap the first two tiles (blank untouched): flips parity, so never solvable."""
    lst = list(board)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def format_board(board: Sequence[int]) -> str:
    s = side(board)
    rows: List[str] = []
    for r in range(s):
        rows.append(" , ".join(f"{t:02d}" for t in board[r * s:(r + 1) * s]))
    return "\n".join(rows)
