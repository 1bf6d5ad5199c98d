from __future__ import annotations

import random
from typing import List, Optional

from .config import EngineConfig
from .errors import CellLocked, GenerationFailed, OutOfBounds, ValueOutOfRange
from .log import get_logger
from .models import Board, clone_grid, copy_grid, count_empty, new_grid, spec_for
from .render import format_board
from .solver import solve, validate_board

logger = get_logger("engine")


class Sudoku:
    """
    One puzzle session: a player-facing board plus the solution it was cut from.

    Lock state is derived from the solution: a cell is locked when its
    solution value is non-zero. The solution is full after generate().
    """

    def __init__(self, size: int = 9, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        spec = spec_for(size)
        self._size = spec.n
        self._base = spec.base
        self._board: Board = new_grid(self._size)
        self._solution: Board = new_grid(self._size)
        self.memorized_solution = False
        # each session owns its random source; never the module-level one
        self.rng = rng if rng is not None else random.Random(seed)

    @classmethod
    def from_config(cls, config: EngineConfig) -> "Sudoku":
        game = cls(config.size, seed=config.seed)
        game.memorized_solution = config.memorized_solution
        return game

    # -----------------------------
    # Accessors
    # -----------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def base(self) -> int:
        return self._base

    @property
    def board(self) -> Board:
        """Snapshot of the working board; edit through set_cell()."""
        return clone_grid(self._board)

    @property
    def solution(self) -> Board:
        return clone_grid(self._solution)

    def get_cell(self, row: int, col: int) -> int:
        self._check_bounds(row, col)
        return self._board[row][col]

    def is_locked(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return self._solution[row][col] != 0

    def empty_count(self) -> int:
        return count_empty(self._board)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfBounds(row, col, self._size)

    # -----------------------------
    # Player input
    # -----------------------------

    def set_cell(self, row: int, col: int, value: int) -> None:
        self._check_bounds(row, col)
        if self._solution[row][col] != 0:
            logger.info("Rejected write to locked cell (%d,%d)", row, col)
            raise CellLocked(row, col)
        if value < 0 or value > self._size:
            logger.info("Rejected value %d at (%d,%d)", value, row, col)
            raise ValueOutOfRange(value, self._size)
        self._board[row][col] = value

    # -----------------------------
    # Generation
    # -----------------------------

    def generate(self) -> None:
        """Fill a random solved grid, keep it as the solution, then blank out cells."""
        grid = self._fill_board()
        copy_grid(self._solution, grid)
        self._board = grid
        self._remove_numbers()
        logger.debug(
            "Generated %dx%d puzzle with %d empty cells",
            self._size, self._size, count_empty(self._board),
        )

    def _shuffled_numbers(self) -> List[int]:
        # Fisher-Yates over 1..N
        nums = list(range(1, self._size + 1))
        for i in range(len(nums) - 1, 0, -1):
            j = self.rng.randrange(i + 1)
            nums[i], nums[j] = nums[j], nums[i]
        return nums

    def _fill_board(self) -> Board:
        grid = new_grid(self._size)

        # diagonal blocks share no row or column, so they can be filled independently
        for i in range(0, self._size, self._base):
            self._fill_subgrid(grid, i, i, self._shuffled_numbers())

        if not solve(grid):
            logger.error("Solver could not complete the diagonal fill:\n%s", format_board(grid))
            raise GenerationFailed(self._size)
        return grid

    def _fill_subgrid(self, grid: Board, row: int, col: int, nums: List[int]) -> None:
        for r in range(self._base):
            for c in range(self._base):
                grid[row + r][col + c] = nums[r * self._base + c]

    def _remove_numbers(self) -> None:
        empties = self._size * self._size * 3 // 4
        logger.debug("Removing %d of %d cells", empties, self._size * self._size)

        # rejection sampling: retry until enough distinct cells are cleared
        while empties > 0:
            row = self.rng.randrange(self._size)
            col = self.rng.randrange(self._size)
            if self._board[row][col] != 0:
                self._board[row][col] = 0
                empties -= 1

    # -----------------------------
    # Checking & solving
    # -----------------------------

    def validate(self) -> bool:
        ok, reason = validate_board(self._board)
        if not ok:
            logger.debug("Board invalid: %s", reason)
        return ok

    def solve_current(self) -> bool:
        """
        Complete the board. With memorized_solution the stored solution is
        revealed; otherwise the current board is solved from scratch. On
        failure the board is left untouched.
        """
        scratch = clone_grid(self._solution if self.memorized_solution else self._board)

        ok, reason = validate_board(scratch)
        if not ok:
            logger.info("Not solving, board has a conflict: %s", reason)
            return False

        if not solve(scratch):
            logger.info("No solution exists for the current board")
            return False

        copy_grid(self._board, self._solution if self.memorized_solution else scratch)
        return True

    def __str__(self) -> str:
        return format_board(self._board)
