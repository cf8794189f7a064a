from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Set, Tuple
from time import perf_counter
import logging
import math
import sys

from idapuzzle.domains.board import Board, blank_index, is_goal, side, validate_board
from idapuzzle.search.neighbors import Heuristic, neighbors

logger = logging.getLogger(__name__)

# frames kept free for callers, heuristics and the neighbor generator
_STACK_HEADROOM = 200


@dataclass
class SearchContext:
    """Mutable state of one IDA* run, shared by every recursive search step."""
    upper_bound: float
    next_bound: float
    path: List[Board] = field(default_factory=list)
    on_path: Set[Board] = field(default_factory=set)
    best_path: List[Board] = field(default_factory=list)
    visited: int = 0
    peak_recursion: int = 0
    sort_neighbors: bool = True


def push(ctx: SearchContext, board: Board) -> None:
    ctx.path.append(board)
    ctx.on_path.add(board)


def pop(ctx: SearchContext) -> Board:
    board = ctx.path.pop()
    ctx.on_path.discard(board)
    return board


def search(ctx: SearchContext, board: Board, hfun: Heuristic) -> None:
    """
    Bounded depth-first step. `board` is the last element of ctx.path.

    - goal reached      -> ctx.best_path is set, callers unwind
    - f = g + 1 + h > upper_bound -> successor pruned, next_bound lowered to f
    - otherwise         -> descend, then backtrack
    """
    ctx.visited += 1
    g = len(ctx.path) - 1
    if g > ctx.peak_recursion:
        ctx.peak_recursion = g

    if is_goal(board):
        ctx.best_path = list(ctx.path)
        return

    for b2, h in neighbors(board, ctx.on_path, hfun, sort=ctx.sort_neighbors):
        f = g + 1 + h
        if f > ctx.upper_bound:
            if f < ctx.next_bound:
                ctx.next_bound = f
            continue
        push(ctx, b2)
        search(ctx, b2, hfun)
        pop(ctx)
        if ctx.best_path:
            return


def _ensure_stack(bound: float) -> None:
    need = int(bound) + _STACK_HEADROOM
    if need > sys.getrecursionlimit():
        logger.debug("raising recursion limit to %d", need)
        sys.setrecursionlimit(need)


def ida_star(
    start: Sequence[int],
    hfun: Heuristic,
    sort_neighbors: bool = True,
    max_visited: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    on_iteration: Optional[Callable[[int, int], None]] = None,
    validate: bool = True,
):
    """
    IDA* with instrumentation.

    hfun: admissible heuristic, board -> int (not checked).
    sort_neighbors: expand successors by ascending h (ties: right, left, down, up).
    max_visited / timeout_sec: checked between outer iterations only.
    on_iteration: called as on_iteration(upper_bound, visited) after each iteration.

    Returns a dict; "path" is empty unless "termination" == "ok".
    """
    board = validate_board(start) if validate else tuple(start)
    algorithm = "IDA*" if sort_neighbors else "IDA* (unsorted)"
    t0 = perf_counter()

    ctx = SearchContext(upper_bound=0, next_bound=hfun(board), sort_neighbors=sort_neighbors)
    push(ctx, board)
    iterations = 0
    termination = "exhausted"

    while not ctx.best_path and ctx.next_bound != math.inf:
        if max_visited is not None and ctx.visited >= max_visited:
            termination = "node_limit"
            break
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            termination = "timeout"
            break

        ctx.upper_bound = ctx.next_bound
        ctx.next_bound = math.inf
        _ensure_stack(ctx.upper_bound)

        search(ctx, board, hfun)
        iterations += 1
        logger.debug("upper bound: %d ; nb_visited_state: %d", ctx.upper_bound, ctx.visited)
        if on_iteration is not None:
            on_iteration(int(ctx.upper_bound), ctx.visited)

    if ctx.best_path:
        termination = "ok"

    return {
        "path": ctx.best_path,
        "g": len(ctx.best_path) - 1 if ctx.best_path else None,
        "visited": ctx.visited,
        "iterations": iterations,
        "peak_recursion": ctx.peak_recursion,
        "bound_final": int(ctx.upper_bound),
        "time": perf_counter() - t0,
        "algorithm": algorithm,
        "termination": termination,
    }


def ida(start: Sequence[int], hfun: Heuristic) -> Tuple[List[Board], int]:
    """Plain interface: (best_path, nb_visited_state). Path is empty when unsolvable."""
    res = ida_star(start, hfun)
    return res["path"], res["visited"]


def moves_from_path(path: Sequence[Board]) -> List[str]:
    """Direction the blank travelled on each step: R, L, D or U."""
    moves: List[str] = []
    for a, b in zip(path, path[1:]):
        s = side(a)
        d = blank_index(b) - blank_index(a)
        if d == 1:
            moves.append("R")
        elif d == -1:
            moves.append("L")
        elif d == s:
            moves.append("D")
        elif d == -s:
            moves.append("U")
        else:
            raise ValueError(f"boards are not one slide apart: {a} -> {b}")
    return moves
