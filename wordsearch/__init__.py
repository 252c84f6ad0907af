"""Word search grid generator.

This package exposes the public API surface via:

- ``wordsearch.engine.builder.build_grid``: grid size and words in, letter rows out.
- ``wordsearch.engine.builder.GridBuilder``: the same build with access to placements.
- ``wordsearch.engine.grid.LetterGrid``: the grid model with its fit check.
"""

from .engine.builder import BuilderConfig, GridBuilder, build_grid
from .engine.grid import LetterGrid

__all__ = [
    "BuilderConfig",
    "GridBuilder",
    "LetterGrid",
    "build_grid",
]

__version__ = "0.1.0"
