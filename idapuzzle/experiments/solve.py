#!/usr/bin/env python3
from __future__ import annotations
import argparse, logging, sys

from idapuzzle.domains.board import REFERENCE_BOARDS, InvalidBoard, format_board, is_solvable, validate_board
from idapuzzle.heuristics.registry import HEURISTICS, get_heuristic
from idapuzzle.search.ida_star import ida_star, moves_from_path

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one sliding-tile board optimally with IDA*.")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--board", type=int, nargs="+", help="Cells row by row, 0 is the blank")
    src.add_argument("--reference", choices=sorted(REFERENCE_BOARDS), default="c0",
                     help="One of the built-in boards (default: c0)")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--unsorted", action="store_true", help="Expand neighbors in generation order")
    p.add_argument("--max_visited", type=int, default=None, help="Stop between iterations past this many nodes")
    p.add_argument("--timeout_sec", type=float, default=None, help="Stop between iterations past this wall time")
    p.add_argument("--quiet", action="store_true", help="Do not print per-iteration progress")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        start = validate_board(args.board if args.board else REFERENCE_BOARDS[args.reference])
    except InvalidBoard as e:
        print(f"Invalid board: {e}", file=sys.stderr)
        return 2

    if not is_solvable(start):
        logger.warning("board has the wrong parity; the search will exhaust without a solution")

    print(format_board(start))

    def progress(bound: int, visited: int):
        if not args.quiet:
            print(f"upper bound: {bound} ; nb_visited_state: {visited}")

    res = ida_star(start, get_heuristic(args.heuristic),
                   sort_neighbors=not args.unsorted,
                   max_visited=args.max_visited,
                   timeout_sec=args.timeout_sec,
                   on_iteration=progress)

    print(f"Elapsed time: {res['time']:.6f} s")
    if res["termination"] != "ok":
        print(f"No solution ({res['termination']})")
        print(f"nb visited states: {res['visited']}")
        return 1

    print(f"nb moves: {res['g']}")
    print(f"nb visited states: {res['visited']}")
    print(f"moves: {''.join(moves_from_path(res['path']))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
