import unittest

from wordmaze.core.constants import Side
from wordmaze.core.exceptions import PerimeterIndexError
from wordmaze.engine.topology import MazeGrid


class PerimeterAddressingTests(unittest.TestCase):
    def test_index_round_trips_for_every_position(self) -> None:
        for width, height in ((2, 2), (3, 2), (2, 5), (7, 4)):
            grid = MazeGrid(width, height)
            seen = set()
            for index in range(grid.perimeter):
                cell = grid.perimeter_cell(index)
                side = grid.perimeter_side(index)
                self.assertEqual(grid.perimeter_index(cell, side), index)
                seen.add((cell, side))
            self.assertEqual(len(seen), 2 * (width + height))

    def test_clockwise_walk_from_top_left(self) -> None:
        grid = MazeGrid(3, 2)
        expected = [
            ((0, 0), Side.TOP),
            ((1, 0), Side.TOP),
            ((2, 0), Side.TOP),
            ((2, 0), Side.RIGHT),
            ((2, 1), Side.RIGHT),
            ((2, 1), Side.BOTTOM),
            ((1, 1), Side.BOTTOM),
            ((0, 1), Side.BOTTOM),
            ((0, 1), Side.LEFT),
            ((0, 0), Side.LEFT),
        ]
        actual = [(grid.perimeter_cell(i), grid.perimeter_side(i)) for i in range(grid.perimeter)]
        self.assertEqual(actual, expected)

    def test_out_of_range_indices_raise(self) -> None:
        grid = MazeGrid(3, 2)
        for index in (-1, 10, 11):
            with self.assertRaises(PerimeterIndexError):
                grid.perimeter_cell(index)
            with self.assertRaises(IndexError):
                grid.perimeter_side(index)
            with self.assertRaises(PerimeterIndexError):
                grid.set_perimeter_open(index, True)

    def test_interior_side_has_no_perimeter_index(self) -> None:
        grid = MazeGrid(3, 3)
        with self.assertRaises(PerimeterIndexError):
            grid.perimeter_index((1, 1), Side.TOP)

    def test_outward_cell_sits_beyond_exit(self) -> None:
        grid = MazeGrid(3, 2)
        self.assertEqual(grid.outward_cell(3), (3, 0))
        self.assertEqual(grid.outward_cell(0), (0, -1))
        self.assertEqual(grid.outward_cell(6), (1, 2))
        self.assertEqual(grid.outward_cell(9), (-1, 0))


class WallStateTests(unittest.TestCase):
    def test_new_grid_is_fully_walled(self) -> None:
        grid = MazeGrid(4, 3)
        for cell in grid.cells():
            for side in Side:
                self.assertFalse(grid.is_wall_open(cell, side))
        self.assertEqual(grid.closed_interior_wall_count(), grid.interior_wall_count())

    def test_set_perimeter_open_flips_one_boundary_wall(self) -> None:
        grid = MazeGrid(3, 2)
        grid.set_perimeter_open(4, True)
        self.assertTrue(grid.is_wall_open((2, 1), Side.RIGHT))
        self.assertTrue(grid.is_perimeter_open(4))
        self.assertEqual(sum(grid.is_perimeter_open(i) for i in range(grid.perimeter)), 1)
        grid.set_perimeter_open(4, False)
        self.assertFalse(grid.is_perimeter_open(4))

    def test_walls_are_shared_between_neighbors(self) -> None:
        grid = MazeGrid(2, 2)
        grid.set_wall_open((0, 0), Side.RIGHT, True)
        grid.set_wall_open((1, 1), Side.TOP, True)
        self.assertTrue(grid.is_wall_open((1, 0), Side.LEFT))
        self.assertTrue(grid.is_wall_open((1, 0), Side.BOTTOM))
        self.assertEqual(grid.open_interior_wall_count(), 2)

    def test_open_sides_ignore_boundary_openings(self) -> None:
        grid = MazeGrid(2, 2)
        grid.set_perimeter_open(0, True)
        grid.set_wall_open((0, 0), Side.BOTTOM, True)
        self.assertEqual(grid.open_sides((0, 0)), [Side.BOTTOM])
        self.assertEqual(grid.open_neighbors((0, 0)), [(0, 1)])

    def test_fill_all_walls_closes_everything(self) -> None:
        grid = MazeGrid(3, 3)
        grid.set_perimeter_open(2, True)
        grid.set_wall_open((1, 1), Side.LEFT, True)
        grid.fill_all_walls()
        self.assertFalse(grid.is_perimeter_open(2))
        self.assertEqual(grid.open_interior_wall_count(), 0)

    def test_rejects_degenerate_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            MazeGrid(1, 5)


class LetterTests(unittest.TestCase):
    def test_letters_start_unset(self) -> None:
        grid = MazeGrid(2, 3)
        self.assertTrue(all(grid.letter_at(cell) is None for cell in grid.cells()))
        grid.set_letter((1, 2), "Q")
        self.assertEqual(grid.letter_at((1, 2)), "Q")
        self.assertEqual(grid.letter_snapshot()[2][1], "Q")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
