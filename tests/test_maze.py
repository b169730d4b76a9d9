import random
import unittest

from wordmaze.core.exceptions import BarrierRelaxationError
from wordmaze.engine.maze import MazeCarver, closed_interior_walls_after_carving, relax_barriers
from wordmaze.engine.topology import MazeGrid
from wordmaze.engine.validator import MazeValidator

SIZES = ((2, 2), (2, 6), (5, 3), (8, 8), (12, 5))


def carve(width: int, height: int, seed: int) -> MazeGrid:
    grid = MazeGrid(width, height)
    MazeCarver(grid, random.Random(seed)).carve()
    return grid


class StuntedCarver(MazeCarver):
    """Carver whose first growth pass stops right after marking its origin."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.growth_origins = []

    def _grow_from(self, origin) -> None:
        self.growth_origins.append(origin)
        if len(self.growth_origins) == 1:
            self._mark(origin)
            return
        super()._grow_from(origin)


class MazeCarverTests(unittest.TestCase):
    def test_carved_maze_is_connected(self) -> None:
        for width, height in SIZES:
            for seed in range(5):
                grid = carve(width, height, seed)
                self.assertTrue(MazeValidator.is_connected(grid), (width, height, seed))

    def test_carved_maze_is_perfect(self) -> None:
        for width, height in SIZES:
            grid = carve(width, height, 11)
            self.assertEqual(grid.open_interior_wall_count(), width * height - 1)
            self.assertEqual(
                grid.closed_interior_wall_count(),
                closed_interior_walls_after_carving(width, height),
            )

    def test_passage_count_matches_spanning_tree(self) -> None:
        grid = MazeGrid(7, 4)
        carver = MazeCarver(grid, random.Random(8))
        carver.carve()
        self.assertEqual(carver.passages, 7 * 4 - 1)

    def test_stray_cells_are_absorbed_into_one_perfect_maze(self) -> None:
        grid = MazeGrid(5, 4)
        carver = StuntedCarver(grid, random.Random(2))
        carver.carve()

        self.assertGreater(len(carver.growth_origins), 1)
        origin, absorbed = carver.growth_origins[0], carver.growth_origins[1]
        self.assertNotEqual(origin, absorbed)
        self.assertIn(absorbed, grid.open_neighbors(origin))
        self.assertTrue(MazeValidator.is_connected(grid))
        self.assertEqual(grid.open_interior_wall_count(), 5 * 4 - 1)
        self.assertEqual(carver.passages, 5 * 4 - 1)

    def test_boundary_stays_closed(self) -> None:
        grid = carve(6, 4, 3)
        self.assertFalse(any(grid.is_perimeter_open(i) for i in range(grid.perimeter)))

    def test_same_seed_reproduces_maze(self) -> None:
        first = carve(9, 7, 42)
        second = carve(9, 7, 42)
        self.assertEqual(first.to_jsonable(), second.to_jsonable())

    def test_carving_resets_previous_walls(self) -> None:
        grid = MazeGrid(4, 4)
        grid.set_perimeter_open(5, True)
        MazeCarver(grid, random.Random(1)).carve()
        self.assertFalse(grid.is_perimeter_open(5))
        self.assertEqual(grid.open_interior_wall_count(), 15)


class BarrierRelaxationTests(unittest.TestCase):
    def test_opens_requested_number_of_interior_walls(self) -> None:
        grid = carve(6, 6, 5)
        relax_barriers(grid, random.Random(5), 7)
        self.assertEqual(grid.open_interior_wall_count(), 35 + 7)
        self.assertFalse(any(grid.is_perimeter_open(i) for i in range(grid.perimeter)))

    def test_can_open_every_remaining_wall(self) -> None:
        grid = carve(4, 4, 8)
        relax_barriers(grid, random.Random(8), closed_interior_walls_after_carving(4, 4))
        self.assertEqual(grid.closed_interior_wall_count(), 0)

    def test_too_many_barriers_is_rejected_without_changes(self) -> None:
        grid = carve(3, 3, 2)
        before = grid.to_jsonable()
        available = grid.closed_interior_wall_count()
        with self.assertRaises(BarrierRelaxationError):
            relax_barriers(grid, random.Random(2), available + 1)
        self.assertEqual(grid.to_jsonable(), before)

    def test_negative_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            relax_barriers(carve(3, 3, 2), random.Random(2), -1)

    def test_closed_walls_after_carving(self) -> None:
        self.assertEqual(closed_interior_walls_after_carving(2, 2), 1)
        self.assertEqual(closed_interior_walls_after_carving(4, 4), 9)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
