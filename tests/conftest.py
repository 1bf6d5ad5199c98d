import pytest

from dynamic_sudoku import Sudoku


@pytest.fixture
def blank9():
    return Sudoku(9, seed=1)


@pytest.fixture
def generated9():
    game = Sudoku(9, seed=2024)
    game.generate()
    return game


@pytest.fixture
def generated4():
    game = Sudoku(4, seed=7)
    game.generate()
    return game
