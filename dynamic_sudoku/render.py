from __future__ import annotations

import math
from typing import Tuple

from .models import Board


def format_board(board: Board, placeholder: str = ".") -> str:
    """
    Plain-text grid with block separators, e.g. for 4x4:

        -----------------
        | 1 . | 3 . |
        ...
    """
    n = len(board)
    base = math.isqrt(n) or 1
    horizontal_line = "-" * (n * 4 + 1)

    lines = []
    for r in range(n):
        if r % base == 0:
            lines.append(horizontal_line)
        parts = []
        for c in range(n):
            if c % base == 0:
                parts.append("| ")
            v = board[r][c]
            parts.append(f"{placeholder} " if v == 0 else f"{v} ")
        parts.append("|")
        lines.append("".join(parts))
    lines.append(horizontal_line)
    return "\n".join(lines)


def board_to_csv(board: Board) -> bytes:
    lines = [",".join(str(v) for v in row) for row in board]
    return ("\n".join(lines) + "\n").encode("utf-8")


def block_edges(r: int, c: int, base: int) -> Tuple[bool, bool, bool, bool]:
    """(top, left, bottom, right): which sides of cell (r, c) lie on a block edge."""
    return r % base == 0, c % base == 0, (r + 1) % base == 0, (c + 1) % base == 0
