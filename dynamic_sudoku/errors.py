from __future__ import annotations


class SudokuError(Exception):
    """Base class for every error raised by the engine."""


class InvalidSize(SudokuError, ValueError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Invalid size: {size}. Only perfect squares are supported (4, 9, 16, ...).")


class OutOfBounds(SudokuError, IndexError):
    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"Cell ({row},{col}) is outside the {size}x{size} board.")


class CellLocked(SudokuError):
    """Raised when writing to a cell whose solution value is already set."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row},{col}) is a pre-filled clue and cannot be changed.")


class ValueOutOfRange(SudokuError, ValueError):
    def __init__(self, value: int, size: int):
        self.value = value
        self.size = size
        super().__init__(f"Invalid value: {value} (allowed 1..{size}, or 0 to clear).")


class GenerationFailed(SudokuError, RuntimeError):
    """The solver could not complete the diagonal-filled grid. Indicates a bug."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Failed to generate a valid {size}x{size} Sudoku.")
