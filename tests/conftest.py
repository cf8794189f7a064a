from collections import deque
from typing import Dict

import pytest

from idapuzzle.domains.board import Board, goal, slide_candidates


def bfs_distances(n: int) -> Dict[Board, int]:
    """Exact move distance to the goal for every board reachable from it."""
    start = goal(n)
    dist: Dict[Board, int] = {start: 0}
    q = deque([start])
    while q:
        s = q.popleft()
        for s2 in slide_candidates(s):
            if s2 in dist:
                continue
            dist[s2] = dist[s] + 1
            q.append(s2)
    return dist


@pytest.fixture(scope="session")
def dist2():
    return bfs_distances(2)


@pytest.fixture(scope="session")
def dist3():
    return bfs_distances(3)
