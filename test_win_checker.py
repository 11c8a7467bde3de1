"""Tests for WinChecker line detection and outcome resolution."""

import numpy as np
import pytest

from supertris import GameState, Mark, WinChecker


X, O, E, D = Mark.X, Mark.O, Mark.EMPTY, Mark.DRAW


@pytest.fixture
def checker():
    return WinChecker()


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_is_found(checker, line):
    grid = np.zeros((3, 3), dtype=np.int8)
    for row, col in line:
        grid[row, col] = O

    assert checker.has_line(grid, O)
    assert not checker.has_line(grid, X)
    assert checker.check_winner(grid) == O
    assert checker.get_winning_line(grid) == line


def test_no_winner(checker):
    grid = np.array([
        [X, O, X],
        [X, O, O],
        [O, X, X],
    ])
    assert checker.check_winner(grid) is None
    assert checker.get_winning_line(grid) is None


def test_draw_cells_never_count(checker):
    grid = np.array([
        [D, D, D],
        [X, D, E],
        [O, E, D],
    ])
    assert checker.check_winner(grid) is None


def test_mixed_line_is_not_a_win(checker):
    grid = np.array([
        [X, X, O],
        [E, E, E],
        [E, E, E],
    ])
    assert checker.check_winner(grid) is None


def test_resolve_keeps_unfinished_sub_board_open(checker):
    state = GameState()
    state.place_mark(0, 0, 1, 1, X)

    assert checker.resolve_sub_board(state, 0, 0, X) == E


def test_resolve_flips_owner(checker):
    state = GameState()
    for col in range(3):
        state.place_mark(2, 1, 0, col, X)
    checker.resolve_sub_board(state, 2, 1, X)
    for col in range(3):
        state.place_mark(2, 1, 2, col, O)

    assert checker.resolve_sub_board(state, 2, 1, O) == O
    assert state.main_board()[2, 1] == O


def test_update_game_state_draw_clears_target(checker):
    state = GameState()
    state.outcomes[:] = D
    state.target = (0, 0)

    checker.update_game_state(state)

    assert state.winner == D
    assert state.target is None


def test_update_game_state_leaves_open_game(checker):
    state = GameState()
    state.outcomes[0, :] = [X, X, O]

    checker.update_game_state(state)

    assert state.winner is None
    assert not checker.check_global_draw(state)
