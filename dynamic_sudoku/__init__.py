"""
Dynamic Sudoku engine: generation, validation and backtracking solving
for any perfect-square board size.
"""

from .config import DEFAULT_SIZE, SUPPORTED_SIZES, EngineConfig, can_generate, resolve_config
from .engine import Sudoku
from .errors import (
    CellLocked,
    GenerationFailed,
    InvalidSize,
    OutOfBounds,
    SudokuError,
    ValueOutOfRange,
)
from .models import Board
from .render import format_board
from .solver import is_safe, is_solved, solve, validate_board

__version__ = "1.0.0"
__all__ = [
    "Board",
    "CellLocked",
    "DEFAULT_SIZE",
    "EngineConfig",
    "GenerationFailed",
    "InvalidSize",
    "OutOfBounds",
    "SUPPORTED_SIZES",
    "Sudoku",
    "SudokuError",
    "ValueOutOfRange",
    "can_generate",
    "format_board",
    "is_safe",
    "is_solved",
    "resolve_config",
    "solve",
    "validate_board",
]
