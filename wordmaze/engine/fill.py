"""Noise characters for cells no answer passes through."""

from __future__ import annotations

import random

from ..utils.logger import get_logger
from .topology import MazeGrid

LOGGER = get_logger(__name__)


def fill_random_characters(grid: MazeGrid, alphabet: str, rng: random.Random) -> int:
    """Give every unset cell a random character from ``alphabet``; return how many."""

    if not alphabet:
        raise ValueError("The fill alphabet cannot be empty")
    filled = 0
    for cell in grid.cells():
        if grid.letter_at(cell) is None:
            grid.set_letter(cell, rng.choice(alphabet))
            filled += 1
    LOGGER.debug("Filled %s cells with noise", filled)
    return filled
