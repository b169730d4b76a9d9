"""Replays a solved path word by word and records branch candidates."""

from __future__ import annotations

from typing import List, Sequence

from ..core.models import Cell, Segmentation, WordBoundary
from ..utils.logger import get_logger
from .topology import MazeGrid

LOGGER = get_logger(__name__)


def segment_path(grid: MazeGrid, path: Sequence[Cell], words: Sequence[str]) -> Segmentation:
    """Write ``words`` along ``path`` and collect each word's branch candidates.

    The first word can only start on the path's first cell. Every later word
    may branch from any open neighbor of the path cell just before its first
    letter. Characters past the end of the path are not placed; when any are
    left over, the very last character is the extra letter.
    """

    boundaries: List[WordBoundary] = []
    offset = 0
    for index, word in enumerate(words):
        if index == 0:
            candidates = [path[0]] if path else []
        elif offset - 1 < len(path):
            candidates = grid.open_neighbors(path[offset - 1])
        else:
            candidates = []
        boundaries.append(
            WordBoundary(index=index, word=word, offset=offset, candidates=candidates)
        )
        for letter in word:
            if offset < len(path):
                grid.set_letter(path[offset], letter)
            offset += 1

    sequence = "".join(words)
    extra_letter = sequence[-1] if sequence and len(path) < len(sequence) else None
    LOGGER.debug(
        "Segmented %s words over %s path cells (extra letter: %s)",
        len(words),
        len(path),
        extra_letter,
    )
    return Segmentation(boundaries=boundaries, extra_letter=extra_letter)
