"""Greedy crossword construction.

Two-phase approach:
  1. Placement: the longest word is centred on an oversized canvas, then every
     other word takes the first valid intersecting slot in reading order.
  2. Crop: the canvas is trimmed to the bounding box of placed letters and the
     clues are numbered in row-major order of their origins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.constants import CANVAS_SIZE, MIN_WORD_LENGTH, Direction
from ..core.models import CrosswordResult, FinalCell, Grid, PlacedClue
from ..data.normalization import prepare_words
from ..utils.logger import get_logger
from .canvas import WorkingCanvas


LOGGER = get_logger(__name__)

SCAN_DIRECTIONS: Tuple[Direction, ...] = (Direction.ACROSS, Direction.DOWN)


@dataclass
class BuilderConfig:
    canvas_size: int = CANVAS_SIZE
    min_word_length: int = MIN_WORD_LENGTH


@dataclass(frozen=True)
class Placement:
    x: int
    y: int
    direction: Direction


class CrosswordBuilder:
    """Places a word list onto a canvas and returns the cropped grid."""

    def __init__(self, config: Optional[BuilderConfig] = None) -> None:
        self.config = config or BuilderConfig()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, words: Iterable[str]) -> CrosswordResult:
        size = self.config.canvas_size
        ordered, rejected = prepare_words(
            words, min_length=self.config.min_word_length, max_length=size
        )
        if rejected:
            LOGGER.debug("Filtered out %s word(s): %s", len(rejected), rejected)
        if not ordered:
            LOGGER.info("No usable words; returning empty crossword")
            return CrosswordResult(rejected=rejected)

        canvas = WorkingCanvas(size)
        placed: List[PlacedClue] = []
        unplaced: List[str] = []

        first = ordered[0]
        self._write(canvas, placed, first, Placement((size - len(first)) // 2, size // 2, Direction.ACROSS))

        for word in ordered[1:]:
            placement = self._find_placement(canvas, word)
            if placement is None:
                LOGGER.debug("No intersecting slot for %s; dropping it", word)
                unplaced.append(word)
                continue
            self._write(canvas, placed, word, placement)

        result = self._crop(canvas, placed)
        result.rejected = rejected
        result.unplaced = unplaced
        LOGGER.info(
            "Built %sx%s crossword with %s clue(s), %s unplaced",
            result.width,
            result.height,
            len(result.clues),
            len(unplaced),
        )
        return result

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    @staticmethod
    def _find_placement(canvas: WorkingCanvas, word: str) -> Optional[Placement]:
        """First valid intersecting slot scanning rows, then columns, across before down."""
        for y in range(canvas.size):
            for x in range(canvas.size):
                for direction in SCAN_DIRECTIONS:
                    if canvas.can_place(word, x, y, direction, must_intersect=True):
                        return Placement(x, y, direction)
        return None

    @staticmethod
    def _write(canvas: WorkingCanvas, placed: List[PlacedClue], word: str, placement: Placement) -> None:
        canvas.write(word, placement.x, placement.y, placement.direction)
        placed.append(
            PlacedClue(
                word=word,
                direction=placement.direction,
                x=placement.x,
                y=placement.y,
                length=len(word),
            )
        )
        LOGGER.debug("Placed %s %s at (%s,%s)", word, placement.direction.value, placement.x, placement.y)

    # ------------------------------------------------------------------
    # Cropping and numbering
    # ------------------------------------------------------------------
    @staticmethod
    def _crop(canvas: WorkingCanvas, placed: List[PlacedClue]) -> CrosswordResult:
        box = canvas.bounding_box()
        if box is None or not placed:
            return CrosswordResult()
        min_x, min_y, max_x, max_y = box
        width = max_x - min_x + 1
        height = max_y - min_y + 1

        grid: Grid = [[None] * width for _ in range(height)]
        clues = sorted(
            (clue.shifted(min_x, min_y) for clue in placed),
            key=lambda clue: (clue.y, clue.x),
        )

        numbers: Dict[Tuple[int, int], int] = {}
        for clue in clues:
            if clue.origin not in numbers:
                numbers[clue.origin] = len(numbers) + 1
            clue.number = numbers[clue.origin]

            for index, (cx, cy) in enumerate(clue.cells):
                cell = grid[cy][cx]
                if cell is None:
                    cell = FinalCell(solution=canvas.get(cx + min_x, cy + min_y) or "")
                    grid[cy][cx] = cell
                if index == 0:
                    cell.is_word_start = True
                    if cell.clue_number is None:
                        cell.clue_number = clue.number

        return CrosswordResult(grid=grid, clues=clues, width=width, height=height)


def build_crossword(words: Iterable[str], config: Optional[BuilderConfig] = None) -> CrosswordResult:
    """Build a cropped, numbered crossword from raw vocabulary strings."""

    return CrosswordBuilder(config).build(words)
