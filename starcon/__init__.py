"""Crossword core for the StarCon vocabulary trainer.

This package exposes the public API surface via:

- ``starcon.engine.builder.build_crossword``: places words and crops the grid.
- ``starcon.engine.hints.select_hint``: picks a partial reveal for a word.
- ``starcon.engine.session.PuzzleSession``: player-side state over a grid.
- ``starcon.io.clues`` helpers: clue sentence generation integrations.
"""

from .engine.builder import BuilderConfig, CrosswordBuilder, build_crossword
from .engine.hints import select_hint
from .engine.session import PuzzleSession

__all__ = [
    "BuilderConfig",
    "CrosswordBuilder",
    "build_crossword",
    "select_hint",
    "PuzzleSession",
]

__version__ = "0.1.0"
