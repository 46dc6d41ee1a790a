# grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .snake import Direction


class Position(NamedTuple):
    x: int
    y: int

    def translate(self, direction: Direction) -> Position:
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Grid:
    """
    Fixed board bounds. Valid cells are [0, columns) x [0, rows).
    """
    columns: int
    rows: int

    def __post_init__(self):
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {self.columns}x{self.rows}")

    @classmethod
    def from_viewport(cls, width_px: int, height_px: int, cell_size: int) -> Grid:
        """
        Fit a grid into a window, leaving one cell of margin on the
        right and bottom edges.
        """
        return cls(width_px // cell_size - 1, height_px // cell_size - 1)

    @property
    def size(self) -> int:
        return self.columns * self.rows

    @property
    def center(self) -> Position:
        return Position(self.columns // 2, self.rows // 2)

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.x < self.columns and 0 <= pos.y < self.rows

    def cells(self) -> Iterator[Position]:
        """Every cell, row by row."""
        for y in range(self.rows):
            for x in range(self.columns):
                yield Position(x, y)
