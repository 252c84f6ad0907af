"""Word search grid construction.

A single pass places each word at the first fitting (cell, direction) pair:
cells are shuffled once per build, directions once per cell. Words with no
fitting pair are dropped. Remaining blanks are then filled with random
letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import ALPHABET, Direction
from ..core.exceptions import InvalidArgumentError, ValidationError
from ..core.models import Coordinate, Placement
from .grid import LetterGrid
from .validator import GridValidator
from ..utils.logger import get_logger
from ..utils.pretty import format_grid


LOGGER = get_logger(__name__)


@dataclass
class BuilderConfig:
    """Configuration values driving a grid build."""

    grid_size: int
    seed: Optional[int] = None
    validate: bool = True

    def __post_init__(self) -> None:
        size = self.grid_size
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidArgumentError(f"Grid size must be a positive integer, got {size!r}")

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


class GridBuilder:
    """Places words into a fresh grid and pads the rest with filler letters."""

    def __init__(self, config: BuilderConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng or config.make_rng()
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, words: Sequence[str]) -> LetterGrid:
        words = self._check_words(words)
        grid = LetterGrid(self.config.grid_size)
        LOGGER.info(
            "Building %sx%s grid for %s words",
            grid.size,
            grid.size,
            len(words),
        )

        coordinates = grid.coordinates()
        self.rng.shuffle(coordinates)

        dropped: List[str] = []
        for raw in words:
            word = self._prepare(raw)
            if word is None or self._place(grid, word, coordinates) is None:
                dropped.append(raw)

        filled = grid.fill_blanks(self.rng)
        LOGGER.info(
            "Placed %s/%s words, %s filler letters",
            len(grid.placements),
            len(words),
            filled,
        )
        if dropped:
            LOGGER.info("Dropped words: %s", ", ".join(repr(w) for w in dropped))
        LOGGER.debug("Final grid:\n%s", format_grid(grid))

        if self.config.validate:
            validation = self.validator.validate(grid)
            if not validation.ok:
                raise ValidationError(f"Grid validation failed: {validation.messages}")
        return grid

    # ------------------------------------------------------------------
    # Placement search
    # ------------------------------------------------------------------
    def _place(
        self, grid: LetterGrid, word: str, coordinates: Sequence[Coordinate]
    ) -> Optional[Placement]:
        for coordinate in coordinates:
            direction = self._direction_for_fit(grid, word, coordinate)
            if direction is not None:
                return grid.place_word(word, coordinate, direction)
        LOGGER.info("No fit for '%s' in %sx%s grid; skipping", word, grid.size, grid.size)
        return None

    def _direction_for_fit(
        self, grid: LetterGrid, word: str, coordinate: Coordinate
    ) -> Optional[Direction]:
        directions = list(Direction)
        self.rng.shuffle(directions)
        for direction in directions:
            if grid.fits(word, coordinate, direction):
                return direction
        return None

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------
    @staticmethod
    def _check_words(words: Optional[Sequence[str]]) -> List[str]:
        if words is None:
            raise InvalidArgumentError("Word list is required")
        if isinstance(words, (str, bytes)):
            raise InvalidArgumentError("Word list must be a sequence of strings, not a single string")
        checked = list(words)
        for index, word in enumerate(checked):
            if not isinstance(word, str):
                raise InvalidArgumentError(
                    f"Word at index {index} must be a string, got {type(word).__name__}"
                )
        return checked

    @staticmethod
    def _prepare(word: str) -> Optional[str]:
        """Strip and uppercase ``word``; return None if anything outside A-Z remains.

        The reference service wrote words verbatim. Normalizing here keeps
        every grid cell within the filler alphabet.
        """

        cleaned = word.strip().upper()
        if any(letter not in ALPHABET for letter in cleaned):
            LOGGER.warning("Word '%s' contains characters outside A-Z; skipping", word)
            return None
        return cleaned


def build_grid(
    grid_size: int,
    words: Sequence[str],
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[List[str]]:
    """Build a filled ``grid_size`` x ``grid_size`` word search.

    Returns rows of single uppercase letters. Words that cannot be placed are
    left out without notice; use :class:`GridBuilder` to inspect placements.
    """

    builder = GridBuilder(BuilderConfig(grid_size=grid_size, seed=seed), rng=rng)
    return builder.build(words).to_rows()
