"""Deterministic rule validation for built crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..core.constants import ORTHOGONAL_STEPS
from ..core.exceptions import ValidationError
from ..core.models import CrosswordResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a cropped crossword."""

    def validate(self, result: CrosswordResult) -> ValidationResult:
        if result.is_empty:
            if result.grid or result.clues:
                return ValidationResult(ok=False, messages=["Empty crossword carries grid data"])
            return ValidationResult(ok=True, messages=[])
        try:
            self._check_dimensions(result)
            self._check_tight_bounds(result)
            self._check_letters(result)
            self._check_numbering(result)
            self._check_adjacency(result)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_dimensions(self, result: CrosswordResult) -> None:
        if len(result.grid) != result.height:
            raise ValidationError(f"Grid has {len(result.grid)} rows, expected {result.height}")
        for y, row in enumerate(result.grid):
            if len(row) != result.width:
                raise ValidationError(f"Row {y} has {len(row)} cells, expected {result.width}")
        for clue in result.clues:
            for x, y in clue.cells:
                if not (0 <= x < result.width and 0 <= y < result.height):
                    raise ValidationError(f"Clue {clue.word} leaves the grid at ({x},{y})")

    def _check_tight_bounds(self, result: CrosswordResult) -> None:
        grid = result.grid
        if all(cell is None for cell in grid[0]):
            raise ValidationError("Top row is empty")
        if all(cell is None for cell in grid[-1]):
            raise ValidationError("Bottom row is empty")
        if all(row[0] is None for row in grid):
            raise ValidationError("Left column is empty")
        if all(row[-1] is None for row in grid):
            raise ValidationError("Right column is empty")

    def _check_letters(self, result: CrosswordResult) -> None:
        covered: Set[Tuple[int, int]] = set()
        for clue in result.clues:
            if len(clue.word) != clue.length:
                raise ValidationError(f"Clue {clue.word} has length {clue.length}")
            for index, (x, y) in enumerate(clue.cells):
                cell = result.grid[y][x]
                if cell is None:
                    raise ValidationError(f"Clue {clue.word} crosses blocked cell ({x},{y})")
                if cell.solution != clue.word[index]:
                    raise ValidationError(
                        f"Letter conflict at ({x},{y}): grid '{cell.solution}' vs {clue.word}"
                    )
                if index == 0 and not cell.is_word_start:
                    raise ValidationError(f"Start of {clue.word} at ({x},{y}) is not flagged")
                covered.add((x, y))
        for y, row in enumerate(result.grid):
            for x, cell in enumerate(row):
                if cell is not None and (x, y) not in covered:
                    raise ValidationError(f"Letter at ({x},{y}) belongs to no clue")

    def _check_numbering(self, result: CrosswordResult) -> None:
        origins = sorted({clue.origin for clue in result.clues}, key=lambda xy: (xy[1], xy[0]))
        expected: Dict[Tuple[int, int], int] = {origin: i for i, origin in enumerate(origins, start=1)}
        for clue in result.clues:
            number = expected[clue.origin]
            if clue.number != number:
                raise ValidationError(f"Clue {clue.word} numbered {clue.number}, expected {number}")
            cell = result.grid[clue.y][clue.x]
            if cell is None or cell.clue_number != number:
                raise ValidationError(f"Cell ({clue.x},{clue.y}) missing clue number {number}")

    def _check_adjacency(self, result: CrosswordResult) -> None:
        memberships: Dict[Tuple[int, int], Set[int]] = {}
        for index, clue in enumerate(result.clues):
            for xy in clue.cells:
                memberships.setdefault(xy, set()).add(index)
        for (x, y), owners in memberships.items():
            for dx, dy in ORTHOGONAL_STEPS:
                neighbor = memberships.get((x + dx, y + dy))
                if neighbor is not None and not owners & neighbor:
                    raise ValidationError(
                        f"Cells ({x},{y}) and ({x + dx},{y + dy}) touch without a shared word"
                    )
