"""
Super Tris engine.

Ties together the game state, move validator, win checker and
history manager behind one API that front ends call:

    game = UltimateTicTacToe()
    result = game.play(0, 0, 1, 1)
    if not result.ok:
        print(result.reason)
"""

from typing import Optional, Tuple, List, Union
from dataclasses import dataclass

from .config import EngineConfig
from .game_state import GameState, Mark, Move, parse_player
from .history import HistoryManager
from .move_validator import MoveValidator, ValidationResult
from .public_state import PublicState, build_public_state, status_message
from .win_checker import WinChecker


# Values of PlayResult.event
EVENT_MOVE = "move"
EVENT_WIN = "win"
EVENT_DRAW = "draw"


@dataclass(frozen=True)
class PlayResult:
    """
    Result of a play() call.

    ok is False for rejected moves, with reason explaining why.
    Accepted moves carry the event ("move", "win" or "draw") and,
    when the game just ended, the winner (X, O or DRAW).
    """
    ok: bool
    state: PublicState
    reason: Optional[str] = None
    event: Optional[str] = None
    winner: Optional[Mark] = None


class UltimateTicTacToe:
    """
    Rule engine for one game of Ultimate Tic-Tac-Toe.

    Game flow:
    1. The current player picks a cell in one of the valid target sub-boards
    2. The mark is placed and the sub-board outcome is resolved
       (a new line always hands the sub-board to the mover)
    3. The main board is checked for a win or a draw
    4. The opponent is sent to the sub-board matching the cell just played,
       or gets a free choice if that sub-board is not playable

    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        starting_player: Union[Mark, str, None] = None
    ):
        """
        Initialize the engine with a fresh game.

        Args:
            config: Engine configuration. Uses defaults if not provided.
            starting_player: "X" or "O". Falls back to config.STARTING_PLAYER.
        """
        self.config = config or EngineConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.history = HistoryManager(self.config.HISTORY_LIMIT)
        self.state = self._fresh_state(starting_player)

    def _fresh_state(self, starting_player: Union[Mark, str, None]) -> GameState:
        if starting_player is None:
            starting_player = self.config.STARTING_PLAYER
        return GameState(current_player=parse_player(starting_player))

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[supertris] {message}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def new_game(self, starting_player: Union[Mark, str, None] = None) -> PublicState:
        """
        Start over with an empty board and empty undo/redo history.

        Args:
            starting_player: "X" or "O". Falls back to config.STARTING_PLAYER.

        Returns:
            The new public state.
        """
        self.state = self._fresh_state(starting_player)
        self.history.clear()
        self._debug(f"New game, {self.state.current_player.symbol} starts")
        return self.get_public_state()

    def undo(self) -> bool:
        """
        Go back to the state before the last accepted move.

        Returns:
            True if a move was undone, False if there was nothing to undo.
        """
        previous = self.history.undo(self.state)
        if previous is None:
            return False

        self.state = previous
        self._debug("Undo")
        return True

    def redo(self) -> bool:
        """
        Re-apply the last undone move.

        Returns:
            True if a move was redone, False if there was nothing to redo.
        """
        following = self.history.redo(self.state)
        if following is None:
            return False

        self.state = following
        self._debug("Redo")
        return True

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def is_move_allowed(self, main_row: int, main_col: int, row: int,
                        col: int) -> ValidationResult:
        """Check a move without playing it."""
        return self.validator.validate_move(self.state, main_row, main_col, row, col)

    def play(self, main_row: int, main_col: int, row: int, col: int) -> PlayResult:
        """
        Play the current player's mark at cell (row, col) of
        sub-board (main_row, main_col).

        Rejected moves change nothing and come back with ok=False
        and a reason.

        Returns:
            PlayResult with the updated public state.
        """
        validation = self.is_move_allowed(main_row, main_col, row, col)
        if not validation.is_valid:
            self._debug(
                f"Rejected ({main_row}, {main_col}, {row}, {col}): {validation.reason}"
            )
            return PlayResult(
                ok=False,
                reason=validation.reason,
                state=self.get_public_state()
            )

        self.history.commit(self.state)

        state = self.state
        player = state.current_player
        previous_outcome = state.get_outcome(main_row, main_col)

        state.place_mark(main_row, main_col, row, col, player)
        self._debug(
            f"{player.symbol} plays ({main_row}, {main_col}, {row}, {col})"
        )

        outcome = self.win_checker.resolve_sub_board(state, main_row, main_col, player)
        if outcome != previous_outcome:
            self._debug(
                f"Sub-board ({main_row}, {main_col}): "
                f"{previous_outcome.symbol} -> {outcome.symbol}"
            )

        self.win_checker.update_game_state(state)

        if state.winner is not None:
            event = EVENT_DRAW if state.winner == Mark.DRAW else EVENT_WIN
            self._debug(f"Game over: {event}, winner {state.winner.symbol}")
            return PlayResult(
                ok=True,
                event=event,
                winner=state.winner,
                state=self.get_public_state()
            )

        # Addressing rule: the cell played picks the opponent's sub-board
        state.target = (row, col) if state.is_playable(row, col) else None
        state.current_player = player.opposite()

        return PlayResult(ok=True, event=EVENT_MOVE, state=self.get_public_state())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def winner(self) -> Optional[Mark]:
        """X, O or DRAW once the game is over, None while playing."""
        return self.state.winner

    @property
    def current_player(self) -> Mark:
        return self.state.current_player

    @property
    def target(self) -> Optional[Tuple[int, int]]:
        return self.state.target

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def get_valid_targets(self) -> List[Tuple[int, int]]:
        return self.validator.get_valid_targets(self.state)

    def get_valid_moves(self) -> List[Move]:
        return self.validator.get_valid_moves(self.state)

    def get_public_state(self) -> PublicState:
        """Get an immutable snapshot of the game for rendering."""
        winning_line = None
        if self.state.winner in (Mark.X, Mark.O):
            winning_line = self.win_checker.get_winning_line(self.state.outcomes)

        return build_public_state(
            self.state,
            self.get_valid_targets(),
            winning_line
        )

    def get_status_message(self) -> str:
        """Get a short prompt describing whose turn it is and where to play."""
        return status_message(
            self.state,
            self.validator.get_forced_target(self.state)
        )

    def main_to_string(self) -> str:
        return self.state.main_to_string()

    def print_board(self):
        self.state.print_board()
