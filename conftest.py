"""Shared fixtures for the Super Tris tests."""

import pytest

from supertris import UltimateTicTacToe, EngineConfig, Mark


_MARKS = {".": Mark.EMPTY, "X": Mark.X, "O": Mark.O}


@pytest.fixture
def game():
    return UltimateTicTacToe()


@pytest.fixture
def fill_sub_board():
    """
    Write a pattern like "XXX/OOX/XO." into a sub-board of a game.
    The move count follows the number of marks; the outcome is
    set only when given.
    """
    def fill(game, main_row, main_col, pattern, outcome=None):
        state = game.state
        for row, line in enumerate(pattern.split("/")):
            for col, char in enumerate(line):
                state.cells[main_row, main_col, row, col] = _MARKS[char]
        state.move_counts[main_row, main_col] = sum(
            char in "XO" for char in pattern
        )
        if outcome is not None:
            state.set_outcome(main_row, main_col, outcome)
    return fill


@pytest.fixture
def debug_config():
    config = EngineConfig()
    config.DEBUG_MODE = True
    return config
