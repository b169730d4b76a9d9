"""Deterministic rule validation for generated mazes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set

from ..core.exceptions import ValidationError
from ..core.models import Cell
from ..utils.logger import get_logger
from .topology import MazeGrid

LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class MazeValidator:
    """Runs deterministic validation over a solved maze."""

    def validate(
        self,
        grid: MazeGrid,
        path: Sequence[Cell],
        sequence: str,
        entrance: Cell,
        exit_cell: Cell,
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_connected(grid)
            self._check_endpoints(path, sequence, entrance, exit_cell)
            self._check_adjacency(grid, path)
            self._check_letters(grid, path, sequence)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def is_connected(grid: MazeGrid) -> bool:
        """True when every cell is reachable from every other through open walls."""

        start = (0, 0)
        seen: Set[Cell] = {start}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for neighbor in grid.open_neighbors(cell):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen) == grid.width * grid.height

    def _check_connected(self, grid: MazeGrid) -> None:
        if not self.is_connected(grid):
            raise ValidationError("Maze has cells unreachable from the entrance")

    @staticmethod
    def _check_endpoints(
        path: Sequence[Cell], sequence: str, entrance: Cell, exit_cell: Cell
    ) -> None:
        if not path:
            raise ValidationError("Path is empty")
        if path[0] != entrance:
            raise ValidationError(f"Path starts at {path[0]}, expected {entrance}")
        if path[-1] != exit_cell:
            raise ValidationError(f"Path ends at {path[-1]}, expected {exit_cell}")
        if len(path) != len(sequence) - 1:
            raise ValidationError(
                f"Path of {len(path)} cells must leave exactly one of {len(sequence)} characters"
            )

    @staticmethod
    def _check_adjacency(grid: MazeGrid, path: Sequence[Cell]) -> None:
        for current, following in zip(path, path[1:]):
            if following not in grid.open_neighbors(current):
                raise ValidationError(f"No open wall between {current} and {following}")

    @staticmethod
    def _check_letters(grid: MazeGrid, path: Sequence[Cell], sequence: str) -> None:
        assigned: Dict[Cell, str] = {}
        for cell, letter in zip(path, sequence):
            if assigned.setdefault(cell, letter) != letter:
                raise ValidationError(
                    f"Cell {cell} revisited with '{letter}' but holds '{assigned[cell]}'"
                )
            if grid.letter_at(cell) != letter:
                raise ValidationError(
                    f"Cell {cell} holds '{grid.letter_at(cell)}', expected '{letter}'"
                )
