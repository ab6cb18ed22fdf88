"""Working canvas used while words are being placed."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..core.constants import Bounds, Direction


class WorkingCanvas:
    """Square scratch grid stored as a flat buffer indexed by ``y * size + x``."""

    def __init__(self, size: int) -> None:
        self.size = size
        self.bounds = Bounds(width=size, height=size)
        self._cells: List[Optional[str]] = [None] * (size * size)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def get(self, x: int, y: int) -> Optional[str]:
        return self._cells[y * self.size + x]

    def is_occupied(self, x: int, y: int) -> bool:
        """True for an in-bounds cell holding a letter; off-canvas counts as empty."""
        return self.in_bounds(x, y) and self._cells[y * self.size + x] is not None

    def occupied(self) -> Iterator[Tuple[int, int]]:
        for index, letter in enumerate(self._cells):
            if letter is not None:
                yield index % self.size, index // self.size

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, word: str, x: int, y: int, direction: Direction, must_intersect: bool) -> bool:
        """Check bounds, free ends, letter agreement and lateral isolation."""

        if x < 0 or y < 0:
            return False
        dx, dy = direction.step
        length = len(word)
        if x + dx * (length - 1) >= self.size or y + dy * (length - 1) >= self.size:
            return False

        if self.is_occupied(x - dx, y - dy):
            return False
        if self.is_occupied(x + dx * length, y + dy * length):
            return False

        has_intersection = False
        for i, char in enumerate(word):
            cx, cy = x + dx * i, y + dy * i
            existing = self.get(cx, cy)
            if existing is not None:
                if existing != char:
                    return False
                has_intersection = True
                continue
            for nx, ny in direction.perpendicular_steps:
                if self.is_occupied(cx + nx, cy + ny):
                    return False

        return has_intersection if must_intersect else True

    def write(self, word: str, x: int, y: int, direction: Direction) -> None:
        dx, dy = direction.step
        for i, char in enumerate(word):
            self._cells[(y + dy * i) * self.size + (x + dx * i)] = char

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Return ``(min_x, min_y, max_x, max_y)`` over occupied cells, or None."""

        min_x = min_y = self.size
        max_x = max_y = -1
        for x, y in self.occupied():
            min_x = min(min_x, x)
            max_x = max(max_x, x)
            min_y = min(min_y, y)
            max_y = max(max_y, y)
        if max_x < 0:
            return None
        return min_x, min_y, max_x, max_y
