"""Text rendering helpers for word search grids."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Union

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid


def format_grid(grid: Union[LetterGrid, Sequence[Sequence[str]]]) -> str:
    """Render the grid row by row, letters separated by a single space."""

    rows: Sequence[Sequence[str]] = grid.to_rows() if hasattr(grid, "to_rows") else grid
    lines: List[str] = [" ".join(row) for row in rows]
    return "\n".join(lines)
