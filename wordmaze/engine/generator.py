"""Main word maze generator orchestration.

One attempt runs: carve a perfect maze, open the entrance and exit, knock out
extra barriers, solve for a path spelling the answers, segment it per word,
place alternate answers and fill the rest with noise. An unsolvable maze is
thrown away and the whole attempt starts over on a fresh topology.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_ALPHABET, DEFAULT_RETRY_LIMIT, MIN_DIMENSION
from ..core.exceptions import (AlternateAnswerError, BarrierRelaxationError, PerimeterIndexError,
                               UnsolvableError, ValidationError)
from ..core.models import AlternatePlacement, Cell, SolvedPath, WordBoundary
from ..data.normalization import clean_answer
from ..utils.logger import get_logger
from .alternates import AlternateAnswerPlacer
from .fill import fill_random_characters
from .maze import MazeCarver, closed_interior_walls_after_carving, relax_barriers
from .segmenter import segment_path
from .solver import PathSolver
from .topology import MazeGrid
from .validator import MazeValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    start_position: int
    end_position: int
    barrier_removals: int = 0
    alphabet: str = DEFAULT_ALPHABET
    seed: Optional[int] = None
    retry_limit: int = DEFAULT_RETRY_LIMIT
    search_budget: Optional[int] = None

    @property
    def perimeter(self) -> int:
        return 2 * (self.width + self.height)

    def validate(self) -> None:
        if self.width < MIN_DIMENSION:
            raise ValueError(f"Mazes must be at least {MIN_DIMENSION} boxes wide")
        if self.height < MIN_DIMENSION:
            raise ValueError(f"Mazes must be at least {MIN_DIMENSION} boxes high")
        for label, position in (("start", self.start_position), ("end", self.end_position)):
            if not 0 <= position < self.perimeter:
                raise PerimeterIndexError(
                    f"The {label} position must be in [0, {self.perimeter}), got {position}"
                )
        if self.start_position == self.end_position:
            raise ValueError("The end position must be different from the start position")
        if self.barrier_removals < 0:
            raise BarrierRelaxationError("Barrier removals must not be negative")
        available = closed_interior_walls_after_carving(self.width, self.height)
        if self.barrier_removals > available:
            raise BarrierRelaxationError(
                f"A {self.width}x{self.height} maze only has {available} removable barriers, "
                f"{self.barrier_removals} requested"
            )
        if not self.alphabet:
            raise ValueError("The fill alphabet cannot be empty")
        if self.retry_limit < 1:
            raise ValueError("retry_limit must be at least 1")
        if self.search_budget is not None and self.search_budget < 1:
            raise ValueError("search_budget must be positive when set")


@dataclass
class WordMazeResult:
    grid: MazeGrid
    path: SolvedPath
    words: List[str]
    boundaries: List[WordBoundary]
    placements: List[AlternatePlacement]
    extra_letter: Optional[str]
    extra_letter_cell: Cell
    answer_letters: List[List[Optional[str]]] = field(default_factory=list)
    attempts: int = 1
    seed: Optional[int] = None


class WordMazeGenerator:
    """High-level orchestrator: maze topology, path solving, then letters."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        config.validate()
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.validator = MazeValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        words: Sequence[str],
        alternates: Optional[Sequence[Sequence[str]]] = None,
    ) -> WordMazeResult:
        cleaned = self._prepare_words(words)
        cleaned_alternates = self._prepare_alternates(cleaned, alternates)
        sequence = "".join(cleaned)

        for attempt in range(1, self.config.retry_limit + 1):
            LOGGER.info("Generation attempt %s/%s", attempt, self.config.retry_limit)
            grid = self.build_topology()
            try:
                result = self._populate(grid, cleaned, cleaned_alternates, sequence)
            except (UnsolvableError, ValidationError) as exc:
                LOGGER.warning("Generation attempt failed: %s", exc)
                continue
            result.attempts = attempt
            LOGGER.info(
                "Word maze completed with %s words and %s alternates",
                len(cleaned),
                len(result.placements),
            )
            return result
        raise UnsolvableError(
            f"Unable to solve a maze for a path of length {len(sequence)} after "
            f"{self.config.retry_limit} attempts; the maze may be too large or too small "
            f"for the answers, or need more barrier removals"
        )

    def build_topology(self) -> MazeGrid:
        """Carve a maze, open the entrance and exit, and relax barriers."""

        grid = MazeGrid(self.config.width, self.config.height)
        LOGGER.info("Generating %sx%s maze", grid.width, grid.height)
        MazeCarver(grid, self.rng).carve()
        grid.set_perimeter_open(self.config.start_position, True)
        grid.set_perimeter_open(self.config.end_position, True)
        relax_barriers(grid, self.rng, self.config.barrier_removals)
        return grid

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------
    def _populate(
        self,
        grid: MazeGrid,
        words: List[str],
        alternates: List[List[str]],
        sequence: str,
    ) -> WordMazeResult:
        entrance = grid.perimeter_cell(self.config.start_position)
        exit_cell = grid.perimeter_cell(self.config.end_position)

        solver = PathSolver(grid, self.rng, max_expansions=self.config.search_budget)
        path = solver.solve(entrance, exit_cell, sequence)

        segmentation = segment_path(grid, path.cells, words)
        validation = self.validator.validate(grid, path.cells, sequence, entrance, exit_cell)
        if not validation.ok:
            raise ValidationError(f"Maze validation failed: {validation.messages}")

        placer = AlternateAnswerPlacer(grid, self.rng, max_expansions=self.config.search_budget)
        placements = placer.place(segmentation.boundaries, alternates)

        answer_letters = grid.letter_snapshot()
        LOGGER.info("Filling the maze with extra letters")
        fill_random_characters(grid, self.config.alphabet, self.rng)

        return WordMazeResult(
            grid=grid,
            path=path,
            words=list(words),
            boundaries=segmentation.boundaries,
            placements=placements,
            extra_letter=segmentation.extra_letter,
            extra_letter_cell=grid.outward_cell(self.config.end_position),
            answer_letters=answer_letters,
            seed=self.config.seed,
        )

    @staticmethod
    def _prepare_words(words: Sequence[str]) -> List[str]:
        cleaned = [clean_answer(word) for word in words]
        if not cleaned:
            raise ValueError("At least one answer word is required")
        if any(not word for word in cleaned):
            raise ValueError("Answer words cannot be empty")
        if sum(len(word) for word in cleaned) < 2:
            raise ValueError("The answers need at least two letters in total")
        return cleaned

    @staticmethod
    def _prepare_alternates(
        words: List[str],
        alternates: Optional[Sequence[Sequence[str]]],
    ) -> List[List[str]]:
        if alternates is None:
            return [[] for _ in words]
        if len(alternates) != len(words):
            raise AlternateAnswerError(
                f"Got {len(alternates)} alternate answer lists for {len(words)} words"
            )
        return [
            [answer for answer in (clean_answer(raw) for raw in answers) if answer]
            for answers in alternates
        ]
