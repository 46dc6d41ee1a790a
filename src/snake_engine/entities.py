# entities.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional
import logging
import random

import numpy as np  # type: ignore

from .grid import Grid, Position

logger = logging.getLogger(__name__)


class EntityKind(Enum):
    APPLE = "apple"


@dataclass(frozen=True)
class Entity:
    kind: EntityKind
    position: Position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y


# ---------- Helpers ----------
def occupancy(grid: Grid, occupied: Iterable[Position]) -> np.ndarray:
    """
    Boolean [rows, columns] mask, True where a cell is taken.
    Positions outside the grid are ignored.
    """
    mask = np.zeros((grid.rows, grid.columns), dtype=bool)
    for pos in occupied:
        if grid.contains(pos):
            mask[pos.y, pos.x] = True
    return mask


def consume(entities: List[Entity], head: Position) -> Optional[Entity]:
    """Remove and return the first live entity sitting on `head`."""
    for i, entity in enumerate(entities):
        if entity.position == head:
            return entities.pop(i)
    return None


# ---------- Spawner ----------
class EntitySpawner:
    """
    Places new entities on the grid.

    By default any cell may be picked, including ones under the snake.
    With avoid_snake=True only free cells are candidates and a full
    board yields no entity.
    """

    def __init__(self, grid: Grid, rng: Optional[random.Random] = None, avoid_snake: bool = False):
        self.grid = grid
        self.rng = rng or random.Random()
        self.avoid_snake = avoid_snake

    def spawn(self, kind: EntityKind, occupied: Iterable[Position] = ()) -> Optional[Entity]:
        if not self.avoid_snake:
            pos = Position(self.rng.randrange(self.grid.columns), self.rng.randrange(self.grid.rows))
        else:
            free = np.flatnonzero(~occupancy(self.grid, occupied))
            if free.size == 0:
                logger.info("Board is full, no %s spawned", kind.value)
                return None
            idx = int(free[self.rng.randrange(free.size)])
            pos = Position(idx % self.grid.columns, idx // self.grid.columns)

        logger.debug("Spawned %s at %s", kind.value, tuple(pos))
        return Entity(kind, pos)
