# snake.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from .config import Direction
from .grid import Cell


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b


@dataclass(frozen=True)
class Move:
    new_head: Cell
    self_collision: bool


class Snake:
    """
    Ordered body segments, head at index 0 and tail at the end.

    Moving is two-phase: `advance` evaluates the next head for a direction
    without touching the body, then `commit_move` applies it once the caller
    knows whether the snake grows this tick.
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("Snake needs at least one segment.")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError("Snake segments must not overlap.")
        self._pending: Optional[Cell] = None

    @classmethod
    def spawn(cls, head: Cell, direction: Direction, length: int) -> Snake:
        """Straight snake of `length` cells trailing behind `head`."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        hx, hy = head
        return cls([(hx - i * dx, hy - i * dy) for i in range(length)])

    @property
    def head(self) -> Cell:
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def cells(self) -> List[Cell]:
        return list(self.positions)

    def advance(self, direction: Direction) -> Move:
        hx, hy = self.head
        dx, dy = direction.value
        new_head = (hx + dx, hy + dy)

        # The tail cell is vacated this tick unless the caller decides to grow.
        body = list(self.positions)[:-1]
        self._pending = new_head
        return Move(new_head=new_head, self_collision=new_head in body)

    def commit_move(self, new_head: Cell, grow: bool) -> None:
        if self._pending is None or self._pending != new_head:
            raise RuntimeError("commit_move() called without a matching advance().")
        self._pending = None
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def occupied(self) -> FrozenSet[Cell]:
        return frozenset(self.positions)

    def __repr__(self):
        return f"<Snake len={len(self)} head={self.head}>"
