"""Greedy best-first search over water sort boards."""

from __future__ import annotations

from typing import Optional

from watersort.bfs import successors
from watersort.puzzle import Board, SearchNode


def heuristic(current: Board, goal: Board) -> int:
    """Estimate how far ``current`` is from ``goal``.

    Every unit that differs from the goal adds, for each level of the goal,
    the Manhattan distance to the first tube holding that colour on that
    level.
    """
    if (len(current), current.capacity) != (len(goal), goal.capacity):
        raise ValueError("boards differ in shape")
    total = 0
    for tube_index, (tube, goal_tube) in enumerate(zip(current.tubes, goal.tubes)):
        for level, (unit, wanted) in enumerate(zip(tube, goal_tube)):
            if unit == wanted:
                continue
            for goal_level in range(goal.capacity):
                match = next(
                    (
                        index
                        for index, candidate in enumerate(goal.tubes)
                        if candidate[goal_level] == unit
                    ),
                    None,
                )
                if match is not None:
                    total += abs(level - goal_level) + abs(tube_index - match)
    return total


def best_first_search(
    start: Board, goal: Board, sources: Optional[int] = None
) -> Optional[SearchNode]:
    """Search greedily by :func:`heuristic`, pouring only onto matching colours.

    Returns the node that reaches ``goal``, or None if it cannot be reached.
    """
    if (len(start), start.capacity) != (len(goal), goal.capacity):
        raise ValueError("start and goal boards differ in shape")
    if sources is not None and not 1 <= sources <= len(start):
        raise ValueError(f"sources must be between 1 and {len(start)}")

    open_nodes: list[tuple[int, SearchNode]] = [(heuristic(start, goal), SearchNode(start))]
    open_boards = {start}
    closed: set[Board] = set()
    while open_nodes:
        _, node = open_nodes.pop()
        open_boards.discard(node.board)
        closed.add(node.board)
        if node.board == goal:
            return node
        for action, board in successors(node.board, sources, match_color=True):
            # The estimate depends on the board alone, so a board already
            # queued or expanded can never come back with a better score.
            if board in open_boards or board in closed:
                continue
            open_boards.add(board)
            open_nodes.append((heuristic(board, goal), SearchNode(board, node, action)))
        open_nodes.sort(key=lambda item: item[0], reverse=True)
    return None