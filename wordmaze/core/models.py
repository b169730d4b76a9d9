"""Data models supporting the word maze generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# (x, y) with 0 <= x < width and 0 <= y < height.
Cell = Tuple[int, int]


@dataclass
class WordEntry:
    """One row of the word list: a question, its answer and alternates."""

    question: str
    answer: str
    alternates: List[str] = field(default_factory=list)


@dataclass
class SolvedPath:
    """Result of the primary path search."""

    cells: List[Cell]
    sequence: str

    @property
    def extra_letter(self) -> Optional[str]:
        if len(self.cells) < len(self.sequence):
            return self.sequence[-1]
        return None

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class WordBoundary:
    """Where one answer word starts on the path and where it could branch."""

    index: int
    word: str
    offset: int
    candidates: List[Cell] = field(default_factory=list)


@dataclass
class Segmentation:
    boundaries: List[WordBoundary]
    extra_letter: Optional[str] = None


@dataclass
class AlternatePlacement:
    """An alternate answer written into the grid."""

    boundary_index: int
    answer: str
    cells: List[Cell]
    exact: bool
