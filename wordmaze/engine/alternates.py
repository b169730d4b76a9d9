"""Alternate answer placement around the primary path's branch points."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from ..core.exceptions import AlternateAnswerError
from ..core.models import AlternatePlacement, Cell, WordBoundary
from ..utils.logger import get_logger
from .solver import PathSolver
from .topology import MazeGrid, step

LOGGER = get_logger(__name__)


class AlternateAnswerPlacer:
    """Writes secondary answers starting from each boundary's branch candidates.

    Each answer first gets an exact search that honours every letter already
    in the grid. When that fails, a best-effort walk is used instead. The
    walk only stays consistent with its own letters, so it can overwrite
    letters from the primary path or from earlier alternates; callers accept
    that as a puzzle-quality trade-off for always placing the answer.
    """

    def __init__(
        self,
        grid: MazeGrid,
        rng: random.Random,
        max_expansions: Optional[int] = None,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.solver = PathSolver(grid, rng, max_expansions=max_expansions)

    def place(
        self,
        boundaries: Sequence[WordBoundary],
        alternates: Sequence[Sequence[str]],
    ) -> List[AlternatePlacement]:
        if len(alternates) != len(boundaries):
            raise AlternateAnswerError(
                f"Got {len(alternates)} alternate answer lists for {len(boundaries)} words"
            )

        placements: List[AlternatePlacement] = []
        for boundary, answers in zip(boundaries, alternates):
            for answer in answers:
                placement = self.place_answer(boundary, answer)
                if placement is not None:
                    placements.append(placement)
        LOGGER.info("Placed %s alternate answers", len(placements))
        return placements

    def place_answer(self, boundary: WordBoundary, answer: str) -> Optional[AlternatePlacement]:
        if not answer:
            return None
        candidates = [
            cell
            for cell in boundary.candidates
            if self.grid.letter_at(cell) in (None, answer[0])
        ]
        if not candidates:
            LOGGER.debug("No branch candidate fits '%s' at word %s", answer, boundary.index)
            return None

        start = self.rng.choice(candidates)
        cells = self.solver.search(start, answer, len(answer))
        exact = cells is not None
        if cells is None:
            LOGGER.warning(
                "Exact placement of '%s' from %s failed; overwriting along a best-effort walk",
                answer,
                start,
            )
            cells = self.best_effort_walk(start, answer)

        for cell, letter in zip(cells, answer):
            self.grid.set_letter(cell, letter)
        return AlternatePlacement(
            boundary_index=boundary.index, answer=answer, cells=cells, exact=exact
        )

    def best_effort_walk(self, start: Cell, answer: str) -> List[Cell]:
        """Single-pass random walk that never backtracks.

        Each step takes the first shuffled open direction whose cell agrees
        with letters this walk already assigned. Letters in the grid are
        ignored. If no direction agrees, the first open direction is taken
        anyway, so the walk always covers the whole answer.
        """

        tentative: Dict[Cell, str] = {start: answer[0]}
        path = [start]
        current = start
        for letter in answer[1:]:
            sides = self.grid.open_sides(current)
            if not sides:
                LOGGER.warning("Walk for '%s' stranded at %s", answer, current)
                break
            self.rng.shuffle(sides)
            chosen = next(
                (side for side in sides if tentative.get(step(current, side), letter) == letter),
                sides[0],
            )
            current = step(current, chosen)
            tentative[current] = letter
            path.append(current)
        return path
