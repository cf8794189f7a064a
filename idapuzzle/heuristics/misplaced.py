from typing import Sequence


def misplaced(s: Sequence[int]) -> int:
    """Number of tiles (blank excluded) not sitting on their own index."""
    n = 0
    for idx, tile in enumerate(s):
        if tile != 0 and tile != idx:
            n += 1
    return n
