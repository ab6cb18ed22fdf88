"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..core.models import CrosswordResult, PlacedClue
    from ..engine.session import PuzzleSession


BLOCKED = "#"
BLANK = "."


def format_grid(result: CrosswordResult) -> str:
    if result.is_empty:
        return "(empty crossword)"
    header_cells = [f"{x:>2}" for x in range(result.width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * result.width - 1))
    for y, row in enumerate(result.grid):
        symbols = [cell.solution if cell is not None else BLOCKED for cell in row]
        lines.append(f"{y:>2} | " + " ".join(f"{symbol:>2}" for symbol in symbols))
    return "\n".join(lines)


def format_session(session: PuzzleSession) -> str:
    """Render the player's view: typed letters, blanks and blocked cells."""
    lines = []
    for y, row in enumerate(session.result.grid):
        symbols = []
        for x, cell in enumerate(row):
            if cell is None:
                symbols.append(BLOCKED)
            else:
                symbols.append(session.entries[y][x] or BLANK)
        lines.append(" ".join(symbols))
    return "\n".join(lines)


def _clue_line(clue: PlacedClue) -> str:
    text = clue.clue or f"({clue.length} letters)"
    return f"  {clue.number:>2}. {text}"


def format_clues(result: CrosswordResult) -> str:
    lines: List[str] = ["ACROSS"]
    lines.extend(_clue_line(clue) for clue in result.across_clues())
    lines.append("DOWN")
    lines.extend(_clue_line(clue) for clue in result.down_clues())
    return "\n".join(lines)


def pretty_print_grid(result: CrosswordResult, *, label: str | None = None, stream=None) -> None:
    """Print the crossword grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(result), file=stream)


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid + placement stats for a built crossword."""

    stream = stream or sys.stdout
    print(format_grid(result), file=stream)
    if result.is_empty:
        return

    total_cells = result.width * result.height
    letter_cells = sum(1 for row in result.grid for cell in row if cell is not None)
    lengths = [clue.length for clue in result.clues]
    length_dist = Counter(lengths)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.width} x {result.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(
        f"  Placed:        {len(result.clues)} "
        f"({len(result.across_clues())} across, {len(result.down_clues())} down)",
        file=stream,
    )
    print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
    dist_parts = [f"{l}:{c}" for l, c in sorted(length_dist.items())]
    print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if result.unplaced:
        print(f"  Unplaced:      {', '.join(result.unplaced)}", file=stream)
    if result.rejected:
        print(f"  Rejected:      {', '.join(result.rejected)}", file=stream)
