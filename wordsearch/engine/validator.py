"""Deterministic rule validation for generated word search grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import ALPHABET, BLANK
from ..core.exceptions import ValidationError
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over the final grid."""

    def validate(self, grid: LetterGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_square(grid)
            self._check_no_blanks(grid)
            self._check_letters_valid(grid)
            self._check_placements(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_square(self, grid: LetterGrid) -> None:
        if len(grid.cells) != grid.size:
            raise ValidationError(f"Grid has {len(grid.cells)} rows, expected {grid.size}")
        for r, row in enumerate(grid.cells):
            if len(row) != grid.size:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {grid.size}")

    def _check_no_blanks(self, grid: LetterGrid) -> None:
        for r in range(grid.size):
            for c in range(grid.size):
                if grid.cell(r, c) == BLANK:
                    raise ValidationError(f"Unfilled cell at ({r},{c})")

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for r in range(grid.size):
            for c in range(grid.size):
                letter = grid.cell(r, c)
                if len(letter) != 1 or letter not in ALPHABET:
                    raise ValidationError(f"Invalid letter '{letter}' at ({r},{c})")

    def _check_placements(self, grid: LetterGrid) -> None:
        for placement in grid.placements:
            start, end = placement.start, placement.end
            if not grid.contains(start) or not grid.contains(end):
                raise ValidationError(
                    f"Word '{placement.word}' extends outside grid "
                    f"from ({start.row},{start.col}) to ({end.row},{end.col})"
                )
            found = grid.read(start, placement.direction, len(placement.word))
            if found != placement.word:
                raise ValidationError(
                    f"Word '{placement.word}' at ({start.row},{start.col}) "
                    f"{placement.direction.name} reads back as '{found}'"
                )
