"""Breadth-first search over water sort boards."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from watersort.puzzle import Board, SearchNode


def _source_limit(tubes: int, sources: Optional[int]) -> int:
    if sources is None:
        return tubes
    if not 1 <= sources <= tubes:
        raise ValueError(f"sources must be between 1 and {tubes}")
    return sources


def _action_number(source: int, target: int, tubes: int) -> int:
    return source * (tubes - 1) + (target if target < source else target - 1) + 1


def successors(
    board: Board, sources: Optional[int] = None, match_color: bool = False
) -> Iterator[tuple[int, Board]]:
    """Yield ``(move number, board)`` for every allowed pour.

    Only the first ``sources`` tubes are poured from; all tubes are used when
    it is None.
    """
    count = len(board)
    for source in range(_source_limit(count, sources)):
        for target in range(count):
            if source == target:
                continue
            poured = board.pour(source, target, match_color)
            if poured is not None:
                yield _action_number(source, target, count), poured


def breadth_first_search(
    start: Board,
    goal: Board,
    sources: Optional[int] = None,
    match_color: bool = False,
) -> Optional[SearchNode]:
    """Find the goal with the fewest pours, or return None if it cannot be reached."""
    if (len(start), start.capacity) != (len(goal), goal.capacity):
        raise ValueError("start and goal boards differ in shape")
    _source_limit(len(start), sources)
    frontier = deque([SearchNode(start)])
    seen = {start}
    while frontier:
        node = frontier.popleft()
        if node.board == goal:
            return node
        for action, board in successors(node.board, sources, match_color):
            if board in seen:
                continue
            seen.add(board)
            frontier.append(SearchNode(board, node, action))
    return None