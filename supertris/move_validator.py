"""
Move validator for Super Tris.
Validates moves and applies the addressing rule that decides which
sub-boards the current player may play in.
"""

from numbers import Integral
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, Move, BOARD_SIZE


# Rejection reasons, in the order they are checked
GAME_OVER = "game over"
OUT_OF_RANGE = "coordinates out of range"
SUB_BOARD_UNAVAILABLE = "sub-board unavailable"
CELL_OCCUPIED = "cell occupied"
WRONG_SUB_BOARD = "wrong sub-board"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[str] = None


def _in_range(value) -> bool:
    # bool is an Integral too, but True/False are not coordinates
    return (
        isinstance(value, Integral)
        and not isinstance(value, bool)
        and 0 <= value < BOARD_SIZE
    )


class MoveValidator:
    """
    Validates Super Tris moves.

    Rules, checked in this order:
    1. Game must not be over
    2. All four coordinates must be integers in 0-2
    3. The sub-board must be playable (not full, not a draw)
    4. The cell must be empty
    5. If the forced target is playable, the move must be inside it
    """

    def validate_move(
        self,
        game_state: GameState,
        main_row: int,
        main_col: int,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move. Never modifies the game state.

        Args:
            game_state: Current game state.
            main_row: Row of the sub-board (0-2).
            main_col: Column of the sub-board (0-2).
            row: Row of the cell inside the sub-board (0-2).
            col: Column of the cell inside the sub-board (0-2).

        Returns:
            ValidationResult with is_valid and reason.
        """
        if game_state.is_game_over:
            return ValidationResult(is_valid=False, reason=GAME_OVER)

        if not all(_in_range(v) for v in (main_row, main_col, row, col)):
            return ValidationResult(is_valid=False, reason=OUT_OF_RANGE)

        if not game_state.is_playable(main_row, main_col):
            return ValidationResult(is_valid=False, reason=SUB_BOARD_UNAVAILABLE)

        if game_state.cells[main_row, main_col, row, col]:
            return ValidationResult(is_valid=False, reason=CELL_OCCUPIED)

        forced = self.get_forced_target(game_state)
        if forced is not None and (main_row, main_col) != forced:
            return ValidationResult(
                is_valid=False,
                reason=f"{WRONG_SUB_BOARD}: play in ({forced[0] + 1}, {forced[1] + 1})"
            )

        return ValidationResult(is_valid=True)

    def get_forced_target(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the sub-board the current player is forced into.

        Returns:
            (main_row, main_col) if a target is set and still playable,
            None if the player may choose freely.
        """
        target = game_state.target
        if target is not None and game_state.is_playable(*target):
            return target
        return None

    def get_valid_targets(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get the sub-boards the current player may play in.

        Returns:
            The forced target alone, or every playable sub-board.
            Empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        forced = self.get_forced_target(game_state)
        if forced is not None:
            return [forced]

        return game_state.playable_sub_boards()

    def get_valid_moves(self, game_state: GameState) -> List[Move]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of Move tuples, one per empty cell of every valid target.
        """
        valid_moves = []

        for main_row, main_col in self.get_valid_targets(game_state):
            for row, col in game_state.empty_cells(main_row, main_col):
                valid_moves.append(Move(main_row, main_col, row, col))

        return valid_moves
