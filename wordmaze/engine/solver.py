"""Letter-consistent randomized backtracking path search."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import Side
from ..core.exceptions import UnsolvableError
from ..core.models import Cell, SolvedPath
from ..utils.logger import get_logger
from .topology import MazeGrid, step

LOGGER = get_logger(__name__)


@dataclass
class _SearchFrame:
    cell: Cell
    index: int
    directions: List[Side]
    undo_mark: int


class PathSolver:
    """Finds walks through open walls whose cells spell a letter sequence.

    Letters are written into the grid the first time a cell is visited and
    recorded in an undo log; backing out of a frame replays the log so that
    a failed search leaves the grid exactly as it found it. A cell may be
    revisited only when its letter equals the character required at that
    step.

    ``max_expansions`` caps the number of frames a single search may push.
    ``None`` leaves the search unbounded.
    """

    def __init__(
        self,
        grid: MazeGrid,
        rng: random.Random,
        max_expansions: Optional[int] = None,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.max_expansions = max_expansions
        self.expansions = 0

    def solve(self, entrance: Cell, exit_cell: Cell, sequence: str) -> SolvedPath:
        """Walk from ``entrance`` to ``exit_cell`` spelling all but the last character.

        The final character is never placed; it becomes the extra letter shown
        outside the exit.
        """

        if len(sequence) < 2:
            raise ValueError("The answer sequence needs at least two characters")
        LOGGER.info(
            "Solving for a %s-cell path from %s to %s", len(sequence) - 1, entrance, exit_cell
        )
        cells = self.search(entrance, sequence, len(sequence) - 1, goal=exit_cell)
        if cells is None:
            raise UnsolvableError(
                f"This maze cannot be solved with a path of length {len(sequence)}"
            )
        LOGGER.info("Found path of %s cells after %s expansions", len(cells), self.expansions)
        return SolvedPath(cells=cells, sequence=sequence)

    def search(
        self,
        start: Cell,
        sequence: str,
        length: int,
        goal: Optional[Cell] = None,
    ) -> Optional[List[Cell]]:
        """Depth-first search for a ``length``-cell walk spelling ``sequence``.

        Succeeds when the walk has ``length`` cells and, if ``goal`` is given,
        ends on it. On success the letters stay written; on failure every
        tentative write is rolled back and ``None`` is returned.
        """

        self.expansions = 0
        if length < 1 or not self._compatible(start, sequence[0]):
            return None

        undo: List[Tuple[Cell, Optional[str]]] = []
        frames: List[_SearchFrame] = []
        path: List[Cell] = []
        pending: Optional[Cell] = start

        while True:
            if pending is not None:
                cell, pending = pending, None
                index = len(path)
                path.append(cell)
                if index == length - 1:
                    if goal is None or cell == goal:
                        self._write(cell, sequence[index], undo)
                        return path
                    path.pop()
                else:
                    if self.max_expansions is not None and self.expansions >= self.max_expansions:
                        LOGGER.debug("Search budget of %s expansions exhausted", self.max_expansions)
                        self._rollback(undo, 0)
                        return None
                    self.expansions += 1
                    mark = len(undo)
                    self._write(cell, sequence[index], undo)
                    directions = self.grid.open_sides(cell)
                    self.rng.shuffle(directions)
                    frames.append(_SearchFrame(cell, index, directions, mark))

            if not frames:
                self._rollback(undo, 0)
                return None

            frame = frames[-1]
            wanted = sequence[frame.index + 1]
            while frame.directions:
                child = step(frame.cell, frame.directions.pop())
                if self._compatible(child, wanted):
                    pending = child
                    break
            else:
                frames.pop()
                path.pop()
                self._rollback(undo, frame.undo_mark)

    # ------------------------------------------------------------------
    # Undo log
    # ------------------------------------------------------------------
    def _compatible(self, cell: Cell, letter: str) -> bool:
        existing = self.grid.letter_at(cell)
        return existing is None or existing == letter

    def _write(self, cell: Cell, letter: str, undo: List[Tuple[Cell, Optional[str]]]) -> None:
        previous = self.grid.letter_at(cell)
        if previous == letter:
            return
        undo.append((cell, previous))
        self.grid.set_letter(cell, letter)

    def _rollback(self, undo: List[Tuple[Cell, Optional[str]]], mark: int) -> None:
        while len(undo) > mark:
            cell, previous = undo.pop()
            self.grid.set_letter(cell, previous)
