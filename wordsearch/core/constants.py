"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


BLANK = "_"
ALPHABET = string.ascii_uppercase


class Direction(Enum):
    """Placement directions, valued by their (row, col) step vector."""

    FORWARD_ROW = (0, 1)
    FORWARD_COL = (1, 0)
    FORWARD_DIAG = (1, 1)
    BACKWARD_ROW = (0, -1)
    BACKWARD_COL = (-1, 0)
    BACKWARD_DIAG = (-1, -1)

    @property
    def step(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
