import logging

import pytest

from dynamic_sudoku.log import get_logger, resolve_level


@pytest.mark.parametrize("raw, level", [("debug", logging.DEBUG), (" Info ", logging.INFO), ("ERROR", logging.ERROR)])
def test_known_level_names(raw, level):
    assert resolve_level(raw) == level


@pytest.mark.parametrize("raw", [None, "", "verbose", "Level 5"])
def test_unknown_level_names_fall_back_to_warning(raw):
    assert resolve_level(raw) == logging.WARNING


def test_child_loggers_share_the_package_root():
    assert get_logger("engine").name == "dynamic_sudoku.engine"
    assert get_logger().name == "dynamic_sudoku"
