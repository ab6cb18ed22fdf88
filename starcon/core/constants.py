"""Shared constants and enumerations for the crossword core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


CANVAS_SIZE = 25
MIN_WORD_LENGTH = 2

VOWELS = frozenset("AEIOUÄÖÜ")

BLANK_MARKER = "____"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """``(dx, dy)`` unit step along the direction."""
        return (1, 0) if self is Direction.ACROSS else (0, 1)

    @property
    def perpendicular_steps(self) -> Tuple[Tuple[int, int], ...]:
        if self is Direction.ACROSS:
            return ((0, -1), (0, 1))
        return ((-1, 0), (1, 0))


ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper, addressed as ``(x, y)``."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
