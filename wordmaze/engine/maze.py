"""Randomized spanning maze carving and barrier relaxation."""

from __future__ import annotations

import random
from typing import List

from ..core.constants import SIDE_ORDER, SPLIT_CHANCE, Side
from ..core.exceptions import BarrierRelaxationError
from ..core.models import Cell
from ..utils.logger import get_logger
from .topology import MazeGrid, step


LOGGER = get_logger(__name__)


def closed_interior_walls_after_carving(width: int, height: int) -> int:
    """Closed interior walls left by a perfect maze of the given size.

    A spanning tree over ``width * height`` cells opens exactly one fewer
    wall than there are cells.
    """

    interior = (width - 1) * height + width * (height - 1)
    return interior - (width * height - 1)


class MazeCarver:
    """Carves a perfect maze with randomized frontier growth.

    Growth starts from a random cell. Each round picks a random frontier cell
    and opens the wall to one of its ungrown neighbors; with probability
    ``split_chance`` it keeps opening walls to further ungrown neighbors of
    the same cell, which gives short side branches. A neighbor is marked
    grown as soon as its wall opens, so no cell is ever reached twice and the
    result stays acyclic.

    A cell leaves the frontier only once it has no ungrown neighbors, so one
    growth pass normally spans the grid. Any cells it does leave ungrown are
    absorbed afterwards: each gets a wall opened to a grown neighbor and
    growth restarts from it.
    """

    def __init__(
        self,
        grid: MazeGrid,
        rng: random.Random,
        split_chance: float = SPLIT_CHANCE,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.split_chance = split_chance
        self.grown: List[List[bool]] = [[False] * grid.width for _ in range(grid.height)]
        self.passages = 0

    def carve(self) -> None:
        self.grid.fill_all_walls()
        origin = (self.rng.randrange(self.grid.width), self.rng.randrange(self.grid.height))
        LOGGER.debug("Growing maze from %s", origin)
        self._grow_from(origin)

        ungrown = self._ungrown_cells()
        while ungrown:
            bordering = [cell for cell in ungrown if self._grown_sides(cell)]
            current = self.rng.choice(bordering)
            side = self.rng.choice(self._grown_sides(current))
            self.grid.set_wall_open(current, side, True)
            self.passages += 1
            LOGGER.debug("Absorbing stray region at %s", current)
            self._grow_from(current)
            ungrown = self._ungrown_cells()

        LOGGER.debug(
            "Carved %sx%s maze with %s passages",
            self.grid.width,
            self.grid.height,
            self.passages,
        )

    # ------------------------------------------------------------------
    # Growth helpers
    # ------------------------------------------------------------------
    def _grow_from(self, origin: Cell) -> None:
        self._mark(origin)
        frontier: List[Cell] = [origin]
        while frontier:
            current = self.rng.choice(frontier)
            sides = self._ungrown_sides(current)
            if not sides:
                frontier.remove(current)
                continue
            while True:
                side = self.rng.choice(sides)
                sides.remove(side)
                child = step(current, side)
                self.grid.set_wall_open(current, side, True)
                self.passages += 1
                self._mark(child)
                frontier.append(child)
                if not sides or self.rng.random() >= self.split_chance:
                    break

    def _mark(self, cell: Cell) -> None:
        x, y = cell
        self.grown[y][x] = True

    def _is_grown(self, cell: Cell) -> bool:
        x, y = cell
        return self.grown[y][x]

    def _ungrown_sides(self, cell: Cell) -> List[Side]:
        return [
            side
            for side in SIDE_ORDER
            if self.grid.contains(step(cell, side)) and not self._is_grown(step(cell, side))
        ]

    def _grown_sides(self, cell: Cell) -> List[Side]:
        return [
            side
            for side in SIDE_ORDER
            if self.grid.contains(step(cell, side)) and self._is_grown(step(cell, side))
        ]

    def _ungrown_cells(self) -> List[Cell]:
        return [cell for cell in self.grid.cells() if not self._is_grown(cell)]


def relax_barriers(grid: MazeGrid, rng: random.Random, barrier_count: int) -> None:
    """Open ``barrier_count`` random closed interior walls.

    Walls are drawn by rejection sampling over every interior wall position,
    so the count is checked against the closed walls first; asking for more
    than exist raises :class:`BarrierRelaxationError` instead of spinning.
    """

    if barrier_count < 0:
        raise BarrierRelaxationError("Barrier removals must not be negative")
    closed = grid.closed_interior_wall_count()
    if barrier_count > closed:
        raise BarrierRelaxationError(
            f"Cannot remove {barrier_count} barriers, only {closed} closed interior walls remain"
        )

    walls = list(grid.interior_walls())
    opened = 0
    while opened < barrier_count:
        cell, side = rng.choice(walls)
        if grid.is_wall_open(cell, side):
            continue
        grid.set_wall_open(cell, side, True)
        opened += 1
    LOGGER.debug("Removed %s interior barriers", opened)
