"""Data models supporting the crossword core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


@dataclass
class PlacedClue:
    """A single word written into the grid."""

    word: str
    direction: Direction
    x: int
    y: int
    length: int
    clue: str = ""
    number: Optional[int] = None

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dx, dy = self.direction.step
        return [(self.x + dx * i, self.y + dy * i) for i in range(self.length)]

    def shifted(self, dx: int, dy: int) -> PlacedClue:
        return PlacedClue(
            word=self.word,
            direction=self.direction,
            x=self.x - dx,
            y=self.y - dy,
            length=self.length,
            clue=self.clue,
            number=self.number,
        )

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "word": self.word,
            "clue": self.clue,
            "direction": self.direction.value,
            "x": self.x,
            "y": self.y,
            "length": self.length,
        }


@dataclass
class FinalCell:
    """A letter cell of the cropped grid."""

    solution: str
    is_word_start: bool = False
    clue_number: Optional[int] = None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "solution": self.solution,
            "is_word_start": self.is_word_start,
            "clue_number": self.clue_number,
        }


Grid = List[List[Optional[FinalCell]]]


@dataclass
class CrosswordResult:
    """Cropped grid, numbered clues and placement diagnostics."""

    grid: Grid = field(default_factory=list)
    clues: List[PlacedClue] = field(default_factory=list)
    width: int = 0
    height: int = 0
    rejected: List[str] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def cell(self, x: int, y: int) -> Optional[FinalCell]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.grid[y][x]

    def across_clues(self) -> List[PlacedClue]:
        return [clue for clue in self.clues if clue.direction == Direction.ACROSS]

    def down_clues(self) -> List[PlacedClue]:
        return [clue for clue in self.clues if clue.direction == Direction.DOWN]

    def find_clue(self, word: str) -> Optional[PlacedClue]:
        target = word.strip().upper()
        for clue in self.clues:
            if clue.word == target:
                return clue
        return None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "grid": [
                [cell.to_jsonable() if cell is not None else None for cell in row]
                for row in self.grid
            ],
            "clues": [clue.to_jsonable() for clue in self.clues],
            "rejected": list(self.rejected),
            "unplaced": list(self.unplaced),
        }


@dataclass(frozen=True)
class HintResult:
    """A contiguous window of a word shown to the player."""

    text: str
    start_index: int
