"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Coordinate:
    """A 0-indexed (row, col) cell position."""

    row: int
    col: int

    def offset(self, step: Tuple[int, int], distance: int = 1) -> Coordinate:
        dr, dc = step
        return Coordinate(self.row + dr * distance, self.col + dc * distance)


@dataclass
class Placement:
    """A word written into the grid from ``start`` along ``direction``."""

    word: str
    start: Coordinate
    direction: Direction
    _cells: Optional[List[Coordinate]] = field(default=None, repr=False, compare=False)

    @property
    def end(self) -> Coordinate:
        return self.start.offset(self.direction.step, len(self.word) - 1)

    @property
    def cells(self) -> List[Coordinate]:
        if self._cells is None:
            step = self.direction.step
            self._cells = [self.start.offset(step, i) for i in range(len(self.word))]
        return self._cells
