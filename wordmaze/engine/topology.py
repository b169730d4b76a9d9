"""Grid topology: wall state, letters and perimeter addressing."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from ..core.constants import MIN_DIMENSION, SIDE_ORDER, SIDE_STEPS, Side
from ..core.exceptions import PerimeterIndexError
from ..core.models import Cell


def step(cell: Cell, side: Side) -> Cell:
    """Return the cell adjacent to ``cell`` across ``side``."""

    dx, dy = SIDE_STEPS[side]
    return cell[0] + dx, cell[1] + dy


class MazeGrid:
    """Rectangular maze with walls on every cell edge and one letter per cell.

    Walls are stored as two boolean edge arrays where ``True`` means the wall
    is present. ``verticals[y][x]`` is the wall on the left of cell ``(x, y)``
    (``x`` in ``[0, width]``) and ``horizontals[y][x]`` is the wall above it
    (``y`` in ``[0, height]``).

    Boundary openings are addressed by a perimeter index that walks the
    boundary clockwise from the top-left corner: the top edge left to right,
    the right edge top to bottom, the bottom edge right to left and finally
    the left edge bottom to top.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise ValueError(
                f"Mazes must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.verticals: List[List[bool]] = [[True] * (width + 1) for _ in range(height)]
        self.horizontals: List[List[bool]] = [[True] * width for _ in range(height + 1)]
        self.letters: List[List[Optional[str]]] = [[None] * width for _ in range(height)]

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------
    @property
    def perimeter(self) -> int:
        return 2 * (self.width + self.height)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def fill_all_walls(self) -> None:
        """Close every wall, interior and boundary."""

        for row in self.verticals:
            row[:] = [True] * len(row)
        for row in self.horizontals:
            row[:] = [True] * len(row)

    def is_wall_open(self, cell: Cell, side: Side) -> bool:
        return not self._wall(cell, side)

    def set_wall_open(self, cell: Cell, side: Side, value: bool) -> None:
        x, y = cell
        if side == Side.TOP:
            self.horizontals[y][x] = not value
        elif side == Side.RIGHT:
            self.verticals[y][x + 1] = not value
        elif side == Side.BOTTOM:
            self.horizontals[y + 1][x] = not value
        else:
            self.verticals[y][x] = not value

    def _wall(self, cell: Cell, side: Side) -> bool:
        x, y = cell
        if side == Side.TOP:
            return self.horizontals[y][x]
        if side == Side.RIGHT:
            return self.verticals[y][x + 1]
        if side == Side.BOTTOM:
            return self.horizontals[y + 1][x]
        return self.verticals[y][x]

    def open_sides(self, cell: Cell) -> List[Side]:
        """Sides of ``cell`` that can be walked through to another cell."""

        return [
            side
            for side in SIDE_ORDER
            if self.contains(step(cell, side)) and not self._wall(cell, side)
        ]

    def open_neighbors(self, cell: Cell) -> List[Cell]:
        return [step(cell, side) for side in self.open_sides(cell)]

    def interior_walls(self) -> Iterator[Tuple[Cell, Side]]:
        """Yield every interior wall once as a (cell, side) pair."""

        for y in range(self.height):
            for x in range(1, self.width):
                yield (x, y), Side.LEFT
        for y in range(1, self.height):
            for x in range(self.width):
                yield (x, y), Side.TOP

    def interior_wall_count(self) -> int:
        return (self.width - 1) * self.height + self.width * (self.height - 1)

    def closed_interior_wall_count(self) -> int:
        return sum(1 for cell, side in self.interior_walls() if self._wall(cell, side))

    def open_interior_wall_count(self) -> int:
        return self.interior_wall_count() - self.closed_interior_wall_count()

    # ------------------------------------------------------------------
    # Perimeter addressing
    # ------------------------------------------------------------------
    def _check_perimeter(self, index: int) -> None:
        if index < 0:
            raise PerimeterIndexError(f"Perimeter index cannot be negative: {index}")
        if index >= self.perimeter:
            raise PerimeterIndexError(
                f"Perimeter index {index} exceeds the maze perimeter of {self.perimeter}"
            )

    def perimeter_cell(self, index: int) -> Cell:
        self._check_perimeter(index)
        w, h = self.width, self.height
        if index < w:
            return index, 0
        if index < w + h:
            return w - 1, index - w
        if index < 2 * w + h:
            return 2 * w + h - index - 1, h - 1
        return 0, 2 * w + 2 * h - index - 1

    def perimeter_side(self, index: int) -> Side:
        self._check_perimeter(index)
        w, h = self.width, self.height
        if index < w:
            return Side.TOP
        if index < w + h:
            return Side.RIGHT
        if index < 2 * w + h:
            return Side.BOTTOM
        return Side.LEFT

    def perimeter_index(self, cell: Cell, side: Side) -> int:
        """Inverse of :meth:`perimeter_cell` / :meth:`perimeter_side`."""

        if not self.contains(cell):
            raise PerimeterIndexError(f"Cell {cell} is outside the maze")
        x, y = cell
        w, h = self.width, self.height
        if side == Side.TOP and y == 0:
            return x
        if side == Side.RIGHT and x == w - 1:
            return w + y
        if side == Side.BOTTOM and y == h - 1:
            return 2 * w + h - x - 1
        if side == Side.LEFT and x == 0:
            return 2 * w + 2 * h - y - 1
        raise PerimeterIndexError(f"Side {side.value} of {cell} is not on the perimeter")

    def set_perimeter_open(self, index: int, value: bool) -> None:
        self.set_wall_open(self.perimeter_cell(index), self.perimeter_side(index), value)

    def is_perimeter_open(self, index: int) -> bool:
        return self.is_wall_open(self.perimeter_cell(index), self.perimeter_side(index))

    def outward_cell(self, index: int) -> Cell:
        """Position just outside the boundary opening, where the extra letter goes."""

        return step(self.perimeter_cell(index), self.perimeter_side(index))

    # ------------------------------------------------------------------
    # Letters
    # ------------------------------------------------------------------
    def letter_at(self, cell: Cell) -> Optional[str]:
        x, y = cell
        return self.letters[y][x]

    def set_letter(self, cell: Cell, letter: Optional[str]) -> None:
        x, y = cell
        self.letters[y][x] = letter

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def letter_snapshot(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.letters]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> Dict[str, object]:
        return {
            "width": self.width,
            "height": self.height,
            "verticals": [list(row) for row in self.verticals],
            "horizontals": [list(row) for row in self.horizontals],
            "letters": self.letter_snapshot(),
        }
