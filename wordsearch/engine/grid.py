"""Grid representation and placement helpers."""

from __future__ import annotations

import random
from typing import List

from ..core.constants import ALPHABET, BLANK, Bounds, Direction
from ..core.exceptions import InvalidArgumentError, PlacementError
from ..core.models import Coordinate, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square letter matrix that records every word written into it."""

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidArgumentError(f"Grid size must be a positive integer, got {size!r}")
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[str]] = [[BLANK for _ in range(size)] for _ in range(size)]
        self.placements: List[Placement] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def at(self, coordinate: Coordinate) -> str:
        return self.cells[coordinate.row][coordinate.col]

    def contains(self, coordinate: Coordinate) -> bool:
        return self.bounds.contains(coordinate.row, coordinate.col)

    def coordinates(self) -> List[Coordinate]:
        """All cells in row-major order."""

        return [Coordinate(r, c) for r in range(self.size) for c in range(self.size)]

    def read(self, start: Coordinate, direction: Direction, length: int) -> str:
        """Read ``length`` letters from ``start`` along ``direction``."""

        step = direction.step
        letters = []
        for i in range(length):
            cursor = start.offset(step, i)
            if not self.contains(cursor):
                break
            letters.append(self.at(cursor))
        return "".join(letters)

    # ------------------------------------------------------------------
    # Fit check
    # ------------------------------------------------------------------
    def fits(self, word: str, coordinate: Coordinate, direction: Direction) -> bool:
        """Return True if ``word`` can be written from ``coordinate`` along ``direction``.

        Every cell the word would cover must be in bounds and either blank or
        already holding the same letter.
        """

        if not word or not self._in_bounds(coordinate, direction, len(word)):
            return False
        step = direction.step
        for index, letter in enumerate(word):
            existing = self.at(coordinate.offset(step, index))
            if existing != BLANK and existing != letter:
                return False
        return True

    def _in_bounds(self, coordinate: Coordinate, direction: Direction, length: int) -> bool:
        # A straight run is in bounds iff both of its ends are.
        end = coordinate.offset(direction.step, length - 1)
        return self.contains(coordinate) and self.contains(end)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place_word(self, word: str, coordinate: Coordinate, direction: Direction) -> Placement:
        if not self.fits(word, coordinate, direction):
            raise PlacementError(
                f"'{word}' does not fit at ({coordinate.row},{coordinate.col}) {direction.name}"
            )

        placement = Placement(word=word, start=coordinate, direction=direction)
        for letter, cursor in zip(word, placement.cells):
            self.cells[cursor.row][cursor.col] = letter
        self.placements.append(placement)
        LOGGER.debug(
            "Placed '%s' at (%s,%s) %s",
            word,
            coordinate.row,
            coordinate.col,
            direction.name,
        )
        return placement

    def fill_blanks(self, rng: random.Random) -> int:
        """Replace every blank cell with a random uppercase letter."""

        filled = 0
        for row in self.cells:
            for col, value in enumerate(row):
                if value == BLANK:
                    row[col] = rng.choice(ALPHABET)
                    filled += 1
        return filled

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def to_rows(self) -> List[List[str]]:
        return [list(row) for row in self.cells]
