from typing import Sequence
import math


def manhattan(s: Sequence[int]) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored).

    Tile t belongs at index t, so its goal cell is divmod(t, side).
    """
    n = math.isqrt(len(s))
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
