import random
import unittest

from wordmaze.engine.fill import fill_random_characters
from wordmaze.engine.topology import MazeGrid


def open_grid(width: int, height: int) -> MazeGrid:
    grid = MazeGrid(width, height)
    for cell, side in list(grid.interior_walls()):
        grid.set_wall_open(cell, side, True)
    return grid


class FillTests(unittest.TestCase):
    def test_only_unset_cells_are_filled(self) -> None:
        grid = open_grid(3, 3)
        grid.set_letter((0, 0), "Q")
        grid.set_letter((2, 2), "Z")

        filled = fill_random_characters(grid, "XY", random.Random(5))

        self.assertEqual(filled, 7)
        self.assertEqual(grid.letter_at((0, 0)), "Q")
        self.assertEqual(grid.letter_at((2, 2)), "Z")
        for cell in grid.cells():
            if cell not in ((0, 0), (2, 2)):
                self.assertIn(grid.letter_at(cell), ("X", "Y"))

    def test_same_seed_gives_same_noise(self) -> None:
        first, second = open_grid(3, 2), open_grid(3, 2)
        fill_random_characters(first, "ABC", random.Random(11))
        fill_random_characters(second, "ABC", random.Random(11))
        self.assertEqual(first.letter_snapshot(), second.letter_snapshot())

    def test_empty_alphabet_rejected(self) -> None:
        with self.assertRaises(ValueError):
            fill_random_characters(open_grid(2, 2), "", random.Random(0))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
