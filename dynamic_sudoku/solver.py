from __future__ import annotations

import math
from typing import Optional, Tuple

from .errors import InvalidSize
from .models import Board, spec_for


# -----------------------------
# Constraint checking
# -----------------------------

def is_safe(grid: Board, row: int, col: int, value: int, base: Optional[int] = None) -> bool:
    """
    True if `value` does not already appear in the row, the column or the
    base x base block of (row, col). The cell itself is never inspected.
    """
    n = len(grid)
    if base is None:
        base = math.isqrt(n)

    cells = grid[row]
    for i in range(n):
        if i != col and cells[i] == value:
            return False
        if i != row and grid[i][col] == value:
            return False

    start_row = row - row % base
    start_col = col - col % base
    for r in range(start_row, start_row + base):
        block_row = grid[r]
        for c in range(start_col, start_col + base):
            if (r != row or c != col) and block_row[c] == value:
                return False

    return True


# -----------------------------
# Backtracking
# -----------------------------

def find_empty(grid: Board, start: int = 0) -> Optional[Tuple[int, int]]:
    """First empty cell at or after row-major position `start`, or None."""
    n = len(grid)
    for pos in range(start, n * n):
        r, c = divmod(pos, n)
        if grid[r][c] == 0:
            return r, c
    return None


def solve(grid: Board) -> bool:
    """
    In-place backtracking solver. Candidates are tried in ascending order,
    so the first completion in row-major order is always the one found.
    Returns False (grid left as it was) when no completion exists.
    """
    spec = spec_for(len(grid))
    if any(len(row) != spec.n for row in grid):
        raise InvalidSize(len(grid))

    n, base = spec.n, spec.base

    def dfs(start: int) -> bool:
        empty = find_empty(grid, start)
        if empty is None:
            return True  # solved

        r, c = empty
        for v in range(1, n + 1):
            if is_safe(grid, r, c, v, base):
                grid[r][c] = v
                if dfs(r * n + c + 1):
                    return True
                grid[r][c] = 0

        return False

    return dfs(0)


# -----------------------------
# Validation
# -----------------------------

def validate_board(board: Board) -> Tuple[bool, str]:
    """
    Checks:
      - board is N x N with N a perfect square
      - values in 0..N
      - no duplicate values in any row/col (one pass), then any box (ignoring 0)
    Says nothing about whether the board can be completed.
    """
    n = len(board)
    if n == 0 or any(len(row) != n for row in board):
        return False, "Board must be square (N x N)."

    try:
        spec = spec_for(n)
    except InvalidSize as e:
        return False, str(e)
    base = spec.base

    for r in range(n):
        row_used = 0
        col_used = 0
        for c in range(n):
            v = board[r][c]
            if not isinstance(v, int) or v < 0 or v > n:
                return False, f"Invalid value at ({r+1},{c+1}): {v} (allowed: 0..{n})."
            if v != 0:
                bit = 1 << v
                if row_used & bit:
                    return False, f"Conflict: value {v} appears twice in row {r+1}."
                row_used |= bit

            # column r, read transposed
            w = board[c][r]
            if not isinstance(w, int) or w < 0 or w > n:
                return False, f"Invalid value at ({c+1},{r+1}): {w} (allowed: 0..{n})."
            if w != 0:
                bit = 1 << w
                if col_used & bit:
                    return False, f"Conflict: value {w} appears twice in column {r+1}."
                col_used |= bit

    for box_row in range(0, n, base):
        for box_col in range(0, n, base):
            box_used = 0
            for r in range(box_row, box_row + base):
                for c in range(box_col, box_col + base):
                    v = board[r][c]
                    if v == 0:
                        continue
                    bit = 1 << v
                    if box_used & bit:
                        return False, (
                            f"Conflict: value {v} appears twice in box "
                            f"({box_row // base + 1},{box_col // base + 1})."
                        )
                    box_used |= bit

    return True, "OK"


def is_solved(board: Board) -> bool:
    """Fully filled and free of conflicts."""
    ok, _ = validate_board(board)
    if not ok:
        return False
    full = spec_for(len(board)).full_mask
    for row in board:
        mask = 0
        for v in row:
            mask |= 1 << v
        # an empty cell sets bit 0, which full_mask never has
        if mask != full:
            return False
    return True
