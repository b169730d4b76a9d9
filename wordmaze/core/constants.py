"""Shared constants and enumerations for the word maze generator."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Side(str, Enum):
    """The four sides of a maze cell, in clockwise order."""

    TOP = "TOP"
    RIGHT = "RIGHT"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"


SIDE_ORDER: Tuple[Side, ...] = (Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT)

# (dx, dy) with y growing downwards.
SIDE_STEPS: Dict[Side, Tuple[int, int]] = {
    Side.TOP: (0, -1),
    Side.RIGHT: (1, 0),
    Side.BOTTOM: (0, 1),
    Side.LEFT: (-1, 0),
}

# Probability of opening one more wall from the same growth cell.
SPLIT_CHANCE = 0.2

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_RETRY_LIMIT = 10
MIN_DIMENSION = 2
