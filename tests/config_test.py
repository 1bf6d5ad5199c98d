import pytest

from dynamic_sudoku.config import DEFAULT_SIZE, SUPPORTED_SIZES, EngineConfig, can_generate, resolve_config


def test_defaults_from_empty_environment():
    assert resolve_config({}) == EngineConfig(size=DEFAULT_SIZE, seed=None, memorized_solution=False)


def test_values_from_environment():
    env = {"SUDOKU_SIZE": "16", "SUDOKU_SEED": " 42 ", "SUDOKU_MEMORIZED_SOLUTION": "Yes"}
    assert resolve_config(env) == EngineConfig(size=16, seed=42, memorized_solution=True)


@pytest.mark.parametrize("flag", ["", "0", "no", "off", "maybe"])
def test_memorized_flag_falsy(flag):
    assert resolve_config({"SUDOKU_MEMORIZED_SOLUTION": flag}).memorized_solution is False


def test_non_integer_size_is_rejected():
    with pytest.raises(ValueError, match="SUDOKU_SIZE"):
        resolve_config({"SUDOKU_SIZE": "nine"})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SUDOKU_SIZE", "4")
    monkeypatch.delenv("SUDOKU_SEED", raising=False)
    assert resolve_config().size == 4


def test_generation_limited_to_small_sizes():
    assert [n for n in SUPPORTED_SIZES if can_generate(n)] == [4, 9]
    assert 16 in SUPPORTED_SIZES
