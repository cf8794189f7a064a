from __future__ import annotations
from typing import Callable, Container, List, Tuple

from idapuzzle.domains.board import Board, slide_candidates

Heuristic = Callable[[Board], int]


def neighbors(
    board: Board,
    path: Container[Board],
    hfun: Heuristic,
    sort: bool = True,
) -> List[Tuple[Board, int]]:
    """Return [(next_board, h(next_board))] for every slide not leading back onto `path`.

    The whole path is checked, not just the parent, so no simple cycle is
    ever re-entered. `path` can be the path list itself or a set mirroring it.

    With `sort`, neighbors come back by ascending h; ties keep generation
    order (right, left, down, up). Without it, generation order is kept.
    """
    out: List[Tuple[Board, int]] = []
    for b2 in slide_candidates(board):
        if b2 in path:
            continue
        out.append((b2, hfun(b2)))
    if sort:
        out.sort(key=lambda item: item[1])
    return out
