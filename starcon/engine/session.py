"""Player-side puzzle state: entries, reveals and progress."""

from __future__ import annotations

import math
from typing import List, Optional, Set, Tuple

from ..core.exceptions import CellNotPlayableError
from ..core.models import CrosswordResult, PlacedClue
from ..utils.logger import get_logger
from .hints import select_hint


LOGGER = get_logger(__name__)

WordKey = Tuple[str, int, int]


class PuzzleSession:
    """Tracks what the player has typed into a built crossword."""

    def __init__(self, result: CrosswordResult, initial_help: int = 0) -> None:
        self.result = result
        self.initial_help = initial_help
        self.entries: List[List[str]] = [[""] * result.width for _ in range(result.height)]
        self.hinted: List[List[bool]] = [[False] * result.width for _ in range(result.height)]
        if initial_help > 0:
            self._apply_initial_help(initial_help)

    def _apply_initial_help(self, num_letters: int) -> None:
        for clue in self.result.clues:
            hint = select_hint(clue.word, num_letters)
            dx, dy = clue.direction.step
            for offset, char in enumerate(hint.text):
                x = clue.x + dx * (hint.start_index + offset)
                y = clue.y + dy * (hint.start_index + offset)
                if self.result.cell(x, y) is not None:
                    self.entries[y][x] = char
                    self.hinted[y][x] = True
        LOGGER.debug("Pre-filled %s letter(s) per word", num_letters)

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def enter_letter(self, x: int, y: int, value: str) -> None:
        if self.result.cell(x, y) is None:
            raise CellNotPlayableError(f"Cell ({x},{y}) is not part of the puzzle")
        self.entries[y][x] = value[-1:].upper()

    def reveal_letter(self, word: str) -> Optional[Tuple[int, int]]:
        """Fill the first empty or wrong cell of ``word``; return its coordinate."""
        clue = self.result.find_clue(word)
        if clue is None:
            return None
        for x, y in clue.cells:
            if not self._is_correct(x, y):
                self._reveal(x, y)
                return x, y
        return None

    def reveal_word(self, word: str) -> bool:
        clue = self.result.find_clue(word)
        if clue is None:
            return False
        for x, y in clue.cells:
            self._reveal(x, y)
        return True

    def _reveal(self, x: int, y: int) -> None:
        cell = self.result.cell(x, y)
        if cell is None:
            raise CellNotPlayableError(f"Cell ({x},{y}) is not part of the puzzle")
        self.entries[y][x] = cell.solution.upper()
        self.hinted[y][x] = True

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------
    def _is_correct(self, x: int, y: int) -> bool:
        cell = self.result.grid[y][x]
        return cell is not None and self.entries[y][x].upper() == cell.solution.upper()

    def is_word_complete(self, clue: PlacedClue) -> bool:
        return all(self._is_correct(x, y) for x, y in clue.cells)

    def completed_words(self) -> Set[WordKey]:
        return {
            (clue.word, clue.x, clue.y)
            for clue in self.result.clues
            if self.is_word_complete(clue)
        }

    def progress(self) -> int:
        """Percentage of letter cells holding the right letter."""
        total = correct = 0
        for y, row in enumerate(self.result.grid):
            for x, cell in enumerate(row):
                if cell is None:
                    continue
                total += 1
                if self._is_correct(x, y):
                    correct += 1
        if total == 0:
            return 0
        # Halves round up.
        return math.floor(correct * 100 / total + 0.5)

    def is_solved(self) -> bool:
        return bool(self.result.clues) and all(self.is_word_complete(clue) for clue in self.result.clues)
