"""Word maze generator: mazes whose solution path spells a list of answers.

This package exposes the public API surface via:

- ``wordmaze.engine.generator.WordMazeGenerator``: orchestrates maze generation.
- ``wordmaze.engine.topology.MazeGrid``: wall, letter and perimeter queries.
- ``wordmaze.io.word_list`` helpers: question/answer CSV loading.
"""

from .core.constants import Side
from .core.exceptions import UnsolvableError, WordMazeError
from .engine.generator import GeneratorConfig, WordMazeGenerator, WordMazeResult
from .engine.topology import MazeGrid

__all__ = [
    "GeneratorConfig",
    "MazeGrid",
    "Side",
    "UnsolvableError",
    "WordMazeError",
    "WordMazeGenerator",
    "WordMazeResult",
]

__version__ = "0.1.0"
