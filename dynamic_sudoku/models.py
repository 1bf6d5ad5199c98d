from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from .errors import InvalidSize

Board = List[List[int]]  # 0 = empty, values 1..N


@dataclass(frozen=True)
class SudokuSpec:
    n: int          # board size: N x N (e.g., 9)
    base: int       # subgrid size: base x base (e.g., 3)
    full_mask: int  # bits 1..N set


def spec_for(n: int) -> SudokuSpec:
    """Validate N and build basic constants."""
    if not isinstance(n, int) or n <= 0:
        raise InvalidSize(n)
    base = math.isqrt(n)
    if base * base != n:
        raise InvalidSize(n)
    # bits 1..N set => (1<<(N+1)) - 2
    full_mask = (1 << (n + 1)) - 2
    return SudokuSpec(n=n, base=base, full_mask=full_mask)


def new_grid(n: int) -> Board:
    return [[0] * n for _ in range(n)]


def copy_grid(dest: Board, src: Board) -> None:
    """Copy src into dest cell by cell. Both must be the same N x N shape."""
    n = len(src)
    if len(dest) != n or any(len(row) != n for row in dest) or any(len(row) != n for row in src):
        raise ValueError("copy_grid needs two grids of the same N x N shape.")
    for r in range(n):
        for c in range(n):
            dest[r][c] = src[r][c]


def clone_grid(src: Board) -> Board:
    return [row[:] for row in src]


def count_empty(grid: Board) -> int:
    return sum(row.count(0) for row in grid)
