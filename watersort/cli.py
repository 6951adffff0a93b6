"""Command line solver for the bundled water sort puzzles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from watersort.best_first import best_first_search
from watersort.bfs import breadth_first_search
from watersort.puzzle import Board, SearchNode, format_solution

ALGORITHMS = ("bfs", "best-first")


@dataclass(frozen=True)
class Puzzle:
    """A start board, its goal and how the breadth-first solver treats it."""

    name: str
    start: Board
    goal: Board
    sources: int
    match_color: bool
    footer: bool


_PUZZLES = {
    "four": Puzzle(
        name="four",
        start=Board.from_tubes([(1, 0, 0, 0), (2, 2, 1, 0), (2, 1, 3, 1), (3, 3, 3, 2)]),
        goal=Board.from_tubes([(1, 1, 1, 1), (2, 2, 2, 2), (0, 0, 0, 0), (3, 3, 3, 3)]),
        sources=4,
        match_color=False,
        footer=False,
    ),
    "five": Puzzle(
        name="five",
        start=Board.from_tubes(
            [(1, 3, 2, 1), (2, 2, 1, 3), (3, 2, 1, 3), (0, 0, 0, 0), (0, 0, 0, 0)]
        ),
        goal=Board.from_tubes(
            [(0, 0, 0, 0), (0, 0, 0, 0), (3, 3, 3, 3), (2, 2, 2, 2), (1, 1, 1, 1)]
        ),
        sources=4,
        match_color=True,
        footer=True,
    ),
}


def get_puzzle(name: str) -> Puzzle:
    """Return the bundled puzzle called ``name``."""
    try:
        return _PUZZLES[name]
    except KeyError:
        raise ValueError(f"unknown puzzle {name!r}") from None


def solve(puzzle: Puzzle, algorithm: str = "bfs") -> Optional[SearchNode]:
    """Solve ``puzzle`` with ``bfs`` or ``best-first``; None if unsolvable."""
    if algorithm == "bfs":
        return breadth_first_search(
            puzzle.start, puzzle.goal, puzzle.sources, puzzle.match_color
        )
    if algorithm == "best-first":
        return best_first_search(puzzle.start, puzzle.goal, puzzle.sources)
    raise ValueError(f"unknown algorithm {algorithm!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="watersort", description="Solve a water sort puzzle."
    )
    parser.add_argument("puzzle", choices=sorted(_PUZZLES), help="puzzle to solve")
    parser.add_argument(
        "-a", "--algorithm", choices=ALGORITHMS, default="bfs", help="search to use"
    )
    args = parser.parse_args(argv)

    puzzle = get_puzzle(args.puzzle)
    footer = True if args.algorithm == "best-first" else puzzle.footer
    out = sys.stdout
    out.write("Start state:\n")
    out.write(puzzle.start.render(footer))
    out.write("Goal state:\n")
    out.write(puzzle.goal.render(footer))
    node = solve(puzzle, args.algorithm)
    if node is None:
        out.write("No solution found.\n")
        return 1
    out.write(format_solution(node, footer=footer))
    return 0


if __name__ == "__main__":
    sys.exit(main())