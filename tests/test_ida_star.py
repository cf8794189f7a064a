import math

import pytest

from idapuzzle.domains.board import REFERENCE_BOARDS, InvalidBoard, blank_index, goal, is_goal, scramble
from idapuzzle.heuristics.manhattan import manhattan
from idapuzzle.heuristics.misplaced import misplaced
from idapuzzle.search.ida_star import SearchContext, ida, ida_star, moves_from_path, pop, push, search


def _assert_valid_path(path, start):
    assert path[0] == start
    assert is_goal(path[-1])
    assert len(set(path)) == len(path)
    moves_from_path(path)  # raises if two consecutive boards are not one slide apart


def test_start_already_solved():
    res = ida_star(goal(3), manhattan)
    assert res["termination"] == "ok"
    assert res["path"] == [goal(3)]
    assert res["g"] == 0
    assert res["visited"] == 1
    assert res["iterations"] == 1


def test_one_move_board():
    start = (1, 0, 2, 3)
    res = ida_star(start, manhattan)
    assert res["path"] == [start, (0, 1, 2, 3)]
    assert res["g"] == 1
    assert res["visited"] == 2
    assert res["iterations"] == 1
    assert res["bound_final"] == 1
    assert moves_from_path(res["path"]) == ["L"]


def test_ida_plain_interface():
    path, visited = ida((1, 0, 2, 3), manhattan)
    assert len(path) == 2
    assert visited == 2


@pytest.mark.parametrize("depth", [1, 2, 3, 4, 5, 6])
def test_short_scrambles_solve_in_exactly_depth_moves(depth):
    for seed in range(5):
        start = scramble(3, depth, seed)
        res = ida_star(start, manhattan)
        assert res["g"] == depth
        _assert_valid_path(res["path"], start)


@pytest.mark.parametrize("h", [manhattan, misplaced])
def test_matches_bfs_distance(h, dist3):
    depths = [8, 12, 16] if h is misplaced else [10, 16, 22, 30]
    for depth in depths:
        for seed in range(3):
            start = scramble(3, depth, seed)
            res = ida_star(start, h)
            assert res["termination"] == "ok"
            assert res["g"] == dist3[start]
            assert res["g"] <= depth
            _assert_valid_path(res["path"], start)


def test_reference_board_c0(dist3):
    start = REFERENCE_BOARDS["c0"]
    res = ida_star(start, manhattan)
    assert res["termination"] == "ok"
    assert res["g"] == dist3[start]
    assert res["bound_final"] == res["g"]
    assert res["visited"] > res["g"]
    _assert_valid_path(res["path"], start)


def test_unsorted_finds_same_length(dist3):
    start = scramble(3, 20, 4)
    a = ida_star(start, manhattan)
    b = ida_star(start, manhattan, sort_neighbors=False)
    assert a["algorithm"] == "IDA*"
    assert b["algorithm"] == "IDA* (unsorted)"
    assert a["g"] == b["g"] == dist3[start]
    _assert_valid_path(b["path"], start)


def test_deterministic():
    start = REFERENCE_BOARDS["c0b"]
    a = ida_star(start, manhattan)
    b = ida_star(start, manhattan)
    assert a["path"] == b["path"]
    assert a["visited"] == b["visited"]
    assert a["iterations"] == b["iterations"]


@pytest.mark.parametrize("start", [(0, 2, 1, 3), (1, 2, 0, 3)])
def test_unsolvable_board_exhausts(start):
    res = ida_star(start, manhattan)
    assert res["termination"] == "exhausted"
    assert res["path"] == []
    assert res["g"] is None
    assert res["visited"] > 0
    path, visited = ida(start, misplaced)
    assert path == [] and visited > 0


def test_visited_is_cumulative_across_iterations():
    seen = []
    res = ida_star(scramble(3, 14, 2), manhattan, on_iteration=lambda ub, v: seen.append((ub, v)))
    assert len(seen) == res["iterations"]
    bounds = [ub for ub, _ in seen]
    counts = [v for _, v in seen]
    assert bounds == sorted(set(bounds))
    assert counts == sorted(counts)
    assert counts[-1] == res["visited"]
    assert bounds[-1] == res["g"]


def test_node_limit_between_iterations():
    res = ida_star((0, 2, 1, 3), manhattan, max_visited=1)
    assert res["termination"] == "node_limit"
    assert res["iterations"] == 1
    assert res["path"] == []


def test_timeout_between_iterations():
    res = ida_star((0, 2, 1, 3), manhattan, timeout_sec=0.0)
    assert res["termination"] == "timeout"
    assert res["path"] == []


@pytest.mark.parametrize("bad", [(0, 1, 2), (0, 0, 1, 2), (1, 2, 3, 4)])
def test_invalid_board_raises(bad):
    with pytest.raises(InvalidBoard):
        ida_star(bad, manhattan)


def test_search_step_updates_context():
    start = (1, 0, 2, 3, 4, 5, 6, 7, 8)
    ctx = SearchContext(upper_bound=0, next_bound=math.inf)
    push(ctx, start)
    search(ctx, start, manhattan)
    # every successor has f >= 1 > 0: nothing expanded, smallest pruned f kept
    assert ctx.visited == 1
    assert ctx.best_path == []
    assert ctx.next_bound == 1
    assert ctx.path == [start] and ctx.on_path == {start}

    ctx.upper_bound, ctx.next_bound = ctx.next_bound, math.inf
    search(ctx, start, manhattan)
    assert ctx.best_path == [start, goal(3)]
    assert ctx.path == [start]
    assert pop(ctx) == start and not ctx.on_path


def test_moves_from_path_directions():
    g = goal(3)
    right = (1, 0, 2, 3, 4, 5, 6, 7, 8)
    down = (1, 4, 2, 3, 0, 5, 6, 7, 8)
    assert moves_from_path([g, right, down]) == ["R", "D"]
    assert moves_from_path([down, right, g]) == ["U", "L"]
    assert blank_index(down) == 4
    with pytest.raises(ValueError):
        moves_from_path([g, down])
