# collision.py
from __future__ import annotations
from enum import Enum
from itertools import islice

from .grid import Grid
from .snake import SnakeBody


class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"

    @property
    def terminal(self) -> bool:
        return self is not Collision.NONE


def hits_wall(grid: Grid, snake: SnakeBody) -> bool:
    return not grid.contains(snake.head)


def hits_self(snake: SnakeBody) -> bool:
    head = snake.head
    return any(seg == head for seg in islice(snake, 1, None))


def check_collision(grid: Grid, snake: SnakeBody) -> Collision:
    """
    Verdict for the snake right after a move. Wall wins when both apply.
    """
    if hits_wall(grid, snake):
        return Collision.WALL
    if hits_self(snake):
        return Collision.SELF
    return Collision.NONE
