from typing import Callable, Dict, Sequence

from idapuzzle.heuristics.manhattan import manhattan
from idapuzzle.heuristics.misplaced import misplaced

HEURISTICS: Dict[str, Callable[[Sequence[int]], int]] = {
    "manhattan": manhattan,
    "misplaced": misplaced,
}

_ALIASES = {
    "m": "manhattan",
    "manh": "manhattan",
    "nbmis": "misplaced",
    "hamming": "misplaced",
}


def get_heuristic(name: str) -> Callable[[Sequence[int]], int]:
    n = name.lower()
    n = _ALIASES.get(n, n)
    if n not in HEURISTICS:
        raise ValueError(f"unknown heuristic {name!r} (choose from {sorted(HEURISTICS)})")
    return HEURISTICS[n]
