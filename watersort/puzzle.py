"""Water sort boards, single-unit pours and solution formatting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

EMPTY = 0
FOOTER_CELL = "\u2558\u2550\u255b"


@dataclass(frozen=True)
class Board:
    """A set of tubes, each listed bottom to top; ``0`` marks an empty slot."""

    tubes: tuple[tuple[int, ...], ...]

    @classmethod
    def from_tubes(cls, tubes: Iterable[Sequence[int]]) -> Board:
        """Build a board from tubes given bottom to top, checking their shape."""
        columns = tuple(tuple(int(unit) for unit in tube) for tube in tubes)
        if not columns:
            raise ValueError("a board needs at least one tube")
        capacity = len(columns[0])
        if capacity == 0:
            raise ValueError("tubes must hold at least one unit")
        if any(len(tube) != capacity for tube in columns):
            raise ValueError("all tubes must have the same capacity")
        if any(unit < EMPTY for tube in columns for unit in tube):
            raise ValueError("colours must be non-negative")
        return cls(columns)

    @property
    def capacity(self) -> int:
        return len(self.tubes[0])

    def __len__(self) -> int:
        return len(self.tubes)

    def tube(self, index: int) -> tuple[int, ...]:
        """Return one tube, bottom to top."""
        if not 0 <= index < len(self.tubes):
            raise IndexError(f"there is no tube {index}")
        return self.tubes[index]

    def pour(self, source: int, target: int, match_color: bool = False) -> Optional[Board]:
        """Move the top unit of ``source`` into ``target``.

        The pour needs a filled bottom slot in the source and a free top slot
        in the target. With ``match_color`` the unit may only land on an empty
        tube or on a unit of its own colour. Returns the new board, or None
        when the pour is not allowed.
        """
        src = self.tube(source)
        dst = self.tube(target)
        if source == target:
            raise ValueError("cannot pour a tube into itself")
        if src[0] == EMPTY or dst[-1] != EMPTY:
            return None
        top = max(level for level, unit in enumerate(src) if unit != EMPTY)
        colour = src[top]
        slot = next(
            (
                level
                for level, unit in enumerate(dst)
                if unit == EMPTY
                and (not match_color or level == 0 or dst[level - 1] == colour)
            ),
            None,
        )
        if slot is None:
            return None
        tubes = list(self.tubes)
        tubes[source] = src[:top] + (EMPTY,) + src[top + 1:]
        tubes[target] = dst[:slot] + (colour,) + dst[slot + 1:]
        return Board(tuple(tubes))

    def render(self, footer: bool = False) -> str:
        """Draw the board top row first, with an optional line of tube bottoms."""
        lines = [
            "".join(f"|{tube[level]}| " for tube in self.tubes)
            for level in reversed(range(self.capacity))
        ]
        lines.append((FOOTER_CELL + " ") * len(self.tubes) if footer else "")
        return "\n".join(lines) + "\n"


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board reached by a search, with the move that led to it."""

    board: Board
    parent: Optional[SearchNode] = None
    action: int = 0

    def path(self) -> list[SearchNode]:
        """Return the nodes from the starting board up to this one."""
        steps = []
        node: Optional[SearchNode] = self
        while node is not None:
            steps.append(node)
            node = node.parent
        steps.reverse()
        return steps


def action_label(number: int, tubes: int) -> str:
    """Describe move ``number`` on a board of ``tubes`` tubes; 0 is the start."""
    if tubes < 2:
        raise ValueError("moves need at least two tubes")
    if not 0 <= number <= tubes * (tubes - 1):
        raise ValueError(f"no move numbered {number} with {tubes} tubes")
    if number == 0:
        return "First State"
    source, offset = divmod(number - 1, tubes - 1)
    target = offset if offset < source else offset + 1
    return f"Pour color tubes {source + 1} to tubes {target + 1}"


def format_solution(node: SearchNode, tubes: Optional[int] = None, footer: bool = False) -> str:
    """Describe every step from the start up to ``node``."""
    count = len(node.board) if tubes is None else tubes
    return "".join(
        f"\nAction {number}: {action_label(step.action, count)}\n{step.board.render(footer)}"
        for number, step in enumerate(node.path())
    )