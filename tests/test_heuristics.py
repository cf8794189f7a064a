import itertools
import random

import pytest

from idapuzzle.domains.board import REFERENCE_BOARDS, goal
from idapuzzle.heuristics.manhattan import manhattan
from idapuzzle.heuristics.misplaced import misplaced
from idapuzzle.heuristics.registry import HEURISTICS, get_heuristic


def test_known_values():
    c0 = REFERENCE_BOARDS["c0"]
    assert manhattan(c0) == 18
    assert misplaced(c0) == 7
    assert manhattan((1, 0, 2, 3)) == 1
    assert misplaced((1, 0, 2, 3)) == 1


def test_blank_is_ignored():
    # only the blank and tile 1 swapped: one tile off by one cell
    b = (1, 0, 2, 3, 4, 5, 6, 7, 8)
    assert manhattan(b) == 1
    assert misplaced(b) == 1


@pytest.mark.parametrize("h", [manhattan, misplaced])
def test_zero_iff_goal_2x2(h):
    for perm in itertools.permutations(range(4)):
        assert (h(perm) == 0) == (perm == goal(2))


@pytest.mark.parametrize("n", [3, 4, 5])
@pytest.mark.parametrize("h", [manhattan, misplaced])
def test_zero_iff_goal_sampled(n, h):
    rng = random.Random(n)
    assert h(goal(n)) == 0
    for _ in range(200):
        cells = list(range(n * n))
        rng.shuffle(cells)
        b = tuple(cells)
        assert (h(b) == 0) == (b == goal(n))


def test_misplaced_never_exceeds_manhattan():
    rng = random.Random(0)
    for _ in range(500):
        cells = list(range(16))
        rng.shuffle(cells)
        assert misplaced(cells) <= manhattan(cells)


@pytest.mark.parametrize("h", [manhattan, misplaced])
def test_admissible_on_every_2x2_board(h, dist2):
    for b, d in dist2.items():
        assert h(b) <= d


@pytest.mark.parametrize("h", [manhattan, misplaced])
def test_admissible_on_3x3_boards(h, dist3):
    assert len(dist3) == 181440
    for k, (b, d) in enumerate(dist3.items()):
        if k % 37 == 0:
            assert h(b) <= d


def test_registry():
    assert set(HEURISTICS) == {"manhattan", "misplaced"}
    assert get_heuristic("manhattan") is manhattan
    assert get_heuristic("Misplaced") is misplaced
    assert get_heuristic("manh") is manhattan
    assert get_heuristic("nbmis") is misplaced
    with pytest.raises(ValueError):
        get_heuristic("linear_conflict")
