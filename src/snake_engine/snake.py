# snake.py
from __future__ import annotations
from collections import deque
from enum import Enum
from typing import Deque, Iterable, Iterator, Tuple

from .grid import Position


class Direction(Enum):
    # (dx, dy) in screen space, y grows downwards
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class SnakeBody:
    """
    Ordered body cells, head at index 0.

    Movement never checks bounds or self-overlap; that is left to
    collision.check_collision once the new head is committed.
    """

    def __init__(self, segments: Iterable[Tuple[int, int]], direction: Direction = Direction.RIGHT):
        self._body: Deque[Position] = deque(Position(x, y) for x, y in segments)
        if not self._body:
            raise ValueError("Snake needs at least one segment")
        self.direction = direction
        self.pending_growth = False

    @property
    def head(self) -> Position:
        return self._body[0]

    @property
    def segments(self) -> Tuple[Position, ...]:
        return tuple(self._body)

    def set_direction(self, direction: Direction) -> None:
        # No guard against reversing into the neck; the next move then self-collides.
        self.direction = direction

    def grow(self) -> None:
        self.pending_growth = True

    def advance(self) -> Position:
        new_head = self.head.translate(self.direction)
        self._body.appendleft(new_head)
        if self.pending_growth:
            self.pending_growth = False
        else:
            self._body.pop()
        return new_head

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def __contains__(self, pos) -> bool:
        return pos in self._body

    def __repr__(self):
        return f"<SnakeBody head={tuple(self.head)} len={len(self)} dir={self.direction.name}>"
