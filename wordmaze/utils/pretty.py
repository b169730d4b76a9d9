"""Pretty-print helpers for word mazes."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..core.constants import Side

if TYPE_CHECKING:
    from ..engine.generator import WordMazeResult
    from ..engine.topology import MazeGrid


def format_maze(
    grid: MazeGrid,
    letters: Optional[Sequence[Sequence[Optional[str]]]] = None,
) -> str:
    """Draw walls with ``+``, ``-`` and ``|`` and one letter per cell."""

    letters = letters if letters is not None else grid.letters
    lines: List[str] = []
    for y in range(grid.height):
        top = ["+"]
        for x in range(grid.width):
            top.append("   " if grid.is_wall_open((x, y), Side.TOP) else "---")
            top.append("+")
        lines.append("".join(top))

        row = []
        for x in range(grid.width):
            row.append(" " if grid.is_wall_open((x, y), Side.LEFT) else "|")
            row.append(f" {letters[y][x] or '.'} ")
        row.append(" " if grid.is_wall_open((grid.width - 1, y), Side.RIGHT) else "|")
        lines.append("".join(row))

    bottom = ["+"]
    for x in range(grid.width):
        bottom.append("   " if grid.is_wall_open((x, grid.height - 1), Side.BOTTOM) else "---")
        bottom.append("+")
    lines.append("".join(bottom))
    return "\n".join(lines)


def pretty_print_maze(grid: MazeGrid, *, label: str | None = None, stream=None) -> None:
    """Print the maze in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_maze(grid), file=stream)


def print_maze_stats(result: WordMazeResult, *, stream=None) -> None:
    """Print the answer key, the filled maze and summary stats."""

    stream = stream or sys.stdout
    grid = result.grid
    print("--- Answer key ---", file=stream)
    print(format_maze(grid, result.answer_letters), file=stream)
    print(file=stream)
    print("--- Maze ---", file=stream)
    print(format_maze(grid), file=stream)

    exact = sum(1 for placement in result.placements if placement.exact)
    print(file=stream)
    print("--- Stats ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({grid.width * grid.height} cells)", file=stream)
    print(f"  Words:         {len(result.words)} ({len(result.path.sequence)} letters)", file=stream)
    print(f"  Path length:   {len(result.path)} cells", file=stream)
    print(f"  Open walls:    {grid.open_interior_wall_count()}/{grid.interior_wall_count()}", file=stream)
    print(f"  Alternates:    {len(result.placements)} ({exact} exact)", file=stream)
    if result.extra_letter:
        print(f"  Extra letter:  {result.extra_letter} at {result.extra_letter_cell}", file=stream)
    print(f"  Attempts:      {result.attempts}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
