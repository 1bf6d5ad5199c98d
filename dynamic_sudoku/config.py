from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

SUPPORTED_SIZES = [4, 9, 16]
DEFAULT_SIZE = 9
# the diagonal-fill search does not finish in practice above 9x9
MAX_GENERATE_SIZE = 9

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EngineConfig:
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None          # None => fresh entropy per engine
    memorized_solution: bool = False    # solve requests reveal the stored solution


def _int_var(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(key, "").strip()
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got '{raw}'.") from None


def resolve_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Read engine settings from the environment:
      SUDOKU_SIZE, SUDOKU_SEED, SUDOKU_MEMORIZED_SOLUTION
    Size is not validated here; the engine rejects non-square sizes itself.
    """
    env = os.environ if environ is None else environ
    size = _int_var(env, "SUDOKU_SIZE")
    seed = _int_var(env, "SUDOKU_SEED")
    memorized = env.get("SUDOKU_MEMORIZED_SOLUTION", "").strip().lower() in _TRUTHY
    return EngineConfig(
        size=DEFAULT_SIZE if size is None else size,
        seed=seed,
        memorized_solution=memorized,
    )


def can_generate(size: int) -> bool:
    """Sizes offered for random puzzles; larger boards are for entering puzzles by hand."""
    return size <= MAX_GENERATE_SIZE
