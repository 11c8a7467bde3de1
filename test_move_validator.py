"""Tests for MoveValidator: rejection order and the addressing rule."""

import pytest

from supertris import GameState, Mark, Move, MoveValidator
from supertris.move_validator import (
    GAME_OVER, OUT_OF_RANGE, SUB_BOARD_UNAVAILABLE, CELL_OCCUPIED, WRONG_SUB_BOARD
)


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.fixture
def state():
    return GameState()


def test_fresh_game_allows_all_81_cells(validator, state):
    moves = validator.get_valid_moves(state)
    assert len(moves) == 81
    assert moves[0] == Move(0, 0, 0, 0)
    assert validator.get_valid_targets(state) == state.playable_sub_boards()


@pytest.mark.parametrize("coords", [
    (-1, 0, 0, 0),
    (0, 3, 0, 0),
    (0, 0, 0, 9),
    (0.0, 0, 0, 0),
    (0, 0, "1", 1),
    (True, 0, 0, 0),
    (0, None, 0, 0),
])
def test_bad_coordinates(validator, state, coords):
    result = validator.validate_move(state, *coords)
    assert not result.is_valid
    assert result.reason == OUT_OF_RANGE


def test_game_over_checked_first(validator, state):
    state.winner = Mark.X
    result = validator.validate_move(state, 5, 5, 5, 5)
    assert result.reason == GAME_OVER
    assert validator.get_valid_moves(state) == []


def test_occupied_reported_before_wrong_sub_board(validator, state):
    state.place_mark(2, 2, 0, 0, Mark.X)
    state.target = (1, 1)

    assert validator.validate_move(state, 2, 2, 0, 0).reason == CELL_OCCUPIED
    assert validator.validate_move(state, 2, 2, 0, 1).reason.startswith(WRONG_SUB_BOARD)
    assert validator.validate_move(state, 1, 1, 0, 1).is_valid


def test_unavailable_reported_before_occupied(validator, state):
    state.cells[0, 0] = Mark.X
    state.move_counts[0, 0] = 9

    assert validator.validate_move(state, 0, 0, 0, 0).reason == SUB_BOARD_UNAVAILABLE


def test_draw_closes_sub_board_with_free_cells(validator, state):
    state.set_outcome(0, 0, Mark.DRAW)

    assert not state.is_playable(0, 0)
    assert validator.validate_move(state, 0, 0, 1, 1).reason == SUB_BOARD_UNAVAILABLE


def test_owned_sub_board_is_still_playable(validator, state):
    state.set_outcome(0, 0, Mark.O)
    state.move_counts[0, 0] = 3

    assert state.is_playable(0, 0)
    assert validator.validate_move(state, 0, 0, 1, 1).is_valid


def test_unplayable_target_means_free_choice(validator, state):
    state.set_outcome(1, 1, Mark.DRAW)
    state.target = (1, 1)

    assert validator.get_forced_target(state) is None
    assert len(validator.get_valid_targets(state)) == 8
    assert validator.validate_move(state, 2, 0, 0, 0).is_valid


def test_forced_target_limits_moves(validator, state):
    state.place_mark(1, 1, 0, 0, Mark.O)
    state.target = (1, 1)

    assert validator.get_valid_targets(state) == [(1, 1)]
    moves = validator.get_valid_moves(state)
    assert len(moves) == 8
    assert Move(1, 1, 0, 0) not in moves
    assert all(m.main_row == 1 and m.main_col == 1 for m in moves)


def test_validation_does_not_mutate(validator, state):
    state.target = (0, 0)
    before = state.copy()

    validator.validate_move(state, 0, 0, 1, 1)
    validator.validate_move(state, 2, 2, 1, 1)
    validator.get_valid_moves(state)

    assert (state.cells == before.cells).all()
    assert (state.move_counts == before.move_counts).all()
    assert state.target == before.target
