"""
Read-only views of the game for renderers and input layers.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, LastMove, Mark, BOARD_SIZE


Grid = Tuple[Tuple[Mark, ...], ...]


@dataclass(frozen=True)
class SubBoardView:
    """One sub-board: its cells, outcome and how many marks it holds."""
    cells: Grid
    outcome: Mark
    move_count: int


@dataclass(frozen=True)
class PublicState:
    """
    Snapshot of everything a front end needs to draw the game.

    Built only from tuples, enums and frozen dataclasses, so holding on
    to it gives no way to change the engine.
    """
    main: Grid
    sub: Tuple[Tuple[SubBoardView, ...], ...]
    current_player: Mark
    target: Optional[Tuple[int, int]]
    winner: Optional[Mark]
    valid_targets: Tuple[Tuple[int, int], ...]
    last_move: Optional[LastMove]
    winning_line: Optional[Tuple[Tuple[int, int], ...]] = None

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None


def _freeze(grid) -> Grid:
    return tuple(tuple(Mark(int(v)) for v in row) for row in grid)


def build_public_state(
    game_state: GameState,
    valid_targets: List[Tuple[int, int]],
    winning_line: Optional[List[Tuple[int, int]]] = None
) -> PublicState:
    """
    Project a game state into an immutable PublicState.

    Args:
        game_state: The live state (not modified).
        valid_targets: Sub-boards the current player may play in.
        winning_line: Main-board line of a won game, if any.
    """
    sub = tuple(
        tuple(
            SubBoardView(
                cells=_freeze(game_state.cells[main_row, main_col]),
                outcome=game_state.get_outcome(main_row, main_col),
                move_count=game_state.get_move_count(main_row, main_col),
            )
            for main_col in range(BOARD_SIZE)
        )
        for main_row in range(BOARD_SIZE)
    )

    return PublicState(
        main=_freeze(game_state.outcomes),
        sub=sub,
        current_player=game_state.current_player,
        target=game_state.target,
        winner=game_state.winner,
        valid_targets=tuple(valid_targets),
        last_move=game_state.last_move,
        winning_line=tuple(winning_line) if winning_line else None,
    )


def status_message(game_state: GameState, forced: Optional[Tuple[int, int]]) -> str:
    """
    Human readable prompt for the current turn.
    Sub-board numbers are 1-based.
    """
    if game_state.is_game_over:
        if game_state.winner == Mark.DRAW:
            return "Draw!"
        return f"{game_state.winner.symbol} wins!"

    who = game_state.current_player.symbol
    if forced is not None:
        return f"Turn: {who} - play in sub-board ({forced[0] + 1}, {forced[1] + 1})"
    return f"Turn: {who} - choose any available sub-board"
