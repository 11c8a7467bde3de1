"""
Game state management for Super Tris (Ultimate Tic-Tac-Toe).
Tracks the nine sub-boards, their outcomes, and the turn state.
"""

from enum import IntEnum
from typing import Optional, List, Tuple, NamedTuple, Union
from dataclasses import dataclass, field

import numpy as np


# Both the meta-board and every sub-board are 3x3
BOARD_SIZE = 3

# A sub-board is full after this many moves
CELLS_PER_SUB_BOARD = BOARD_SIZE * BOARD_SIZE


class Mark(IntEnum):
    """
    Value of a cell or an outcome.

    Cells only ever hold EMPTY, X or O. DRAW is used for
    sub-board outcomes and the global result.
    """
    EMPTY = 0
    X = 1
    O = 2
    DRAW = 3

    def opposite(self) -> "Mark":
        """Get the opposite player."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError(f"{self.name} is not a player")

    @property
    def symbol(self) -> str:
        """Single character used in text output."""
        return _SYMBOLS[self]


_SYMBOLS = {
    Mark.EMPTY: ".",
    Mark.X: "X",
    Mark.O: "O",
    Mark.DRAW: "D",
}

PLAYERS = (Mark.X, Mark.O)


def parse_player(value: Union[Mark, str]) -> Mark:
    """
    Turn "X"/"O" (any case) or a player Mark into a player Mark.

    Raises:
        ValueError: If the value does not name a player.
    """
    if isinstance(value, Mark):
        if value in PLAYERS:
            return value
    elif isinstance(value, str):
        name = value.strip().upper()
        if name in ("X", "O"):
            return Mark[name]
    raise ValueError(f"Invalid player {value!r}. Must be 'X' or 'O'.")


class Move(NamedTuple):
    """A legal move: sub-board (main_row, main_col), cell (row, col)."""
    main_row: int
    main_col: int
    row: int
    col: int


@dataclass(frozen=True)
class LastMove:
    """The most recently accepted move."""
    main_row: int
    main_col: int
    row: int
    col: int
    player: Mark


def _empty_cells() -> np.ndarray:
    return np.zeros((BOARD_SIZE,) * 4, dtype=np.int8)


def _empty_grid() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


@dataclass(eq=False)
class GameState:
    """
    The complete state of a Super Tris game.

    Tracks:
    - cells[R, C, r, c]: the mark at cell (r, c) of sub-board (R, C)
    - outcomes[R, C]: the outcome of each sub-board (EMPTY while unresolved)
    - move_counts[R, C]: how many marks each sub-board holds (0-9)
    - whose turn it is, the forced target, the global winner and the last move

    The main board is not stored separately, it mirrors ``outcomes``.
    Only the engine mutates a GameState; everything it hands out is a copy.
    """

    cells: np.ndarray = field(default_factory=_empty_cells)
    outcomes: np.ndarray = field(default_factory=_empty_grid)
    move_counts: np.ndarray = field(default_factory=_empty_grid)

    current_player: Mark = Mark.X

    # Sub-board the current player must play in, None means free choice
    target: Optional[Tuple[int, int]] = None

    # Global result: X, O or DRAW once the game is over
    winner: Optional[Mark] = None

    last_move: Optional[LastMove] = None

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    # ------------------------------------------------------------------
    # Read queries
    # ------------------------------------------------------------------

    def get_cell(self, main_row: int, main_col: int, row: int, col: int) -> Mark:
        """Get the mark at cell (row, col) of sub-board (main_row, main_col)."""
        return Mark(int(self.cells[main_row, main_col, row, col]))

    def get_outcome(self, main_row: int, main_col: int) -> Mark:
        """Get the outcome of a sub-board (EMPTY if unresolved)."""
        return Mark(int(self.outcomes[main_row, main_col]))

    def get_move_count(self, main_row: int, main_col: int) -> int:
        return int(self.move_counts[main_row, main_col])

    def sub_board(self, main_row: int, main_col: int) -> np.ndarray:
        """Get a copy of one sub-board's 3x3 cells."""
        return self.cells[main_row, main_col].copy()

    def main_board(self) -> np.ndarray:
        """Get a copy of the main board (one outcome per sub-board)."""
        return self.outcomes.copy()

    def is_playable(self, main_row: int, main_col: int) -> bool:
        """
        Check whether a sub-board can still receive marks.

        A sub-board is playable while it has free cells and is not a
        draw. Being owned by a player does not close it.
        """
        return bool(
            self.move_counts[main_row, main_col] < CELLS_PER_SUB_BOARD
            and self.outcomes[main_row, main_col] != Mark.DRAW
        )

    def playable_sub_boards(self) -> List[Tuple[int, int]]:
        """
        Get all playable sub-boards.

        Returns:
            List of (main_row, main_col) tuples in row-major order.
        """
        playable = []
        for main_row in range(BOARD_SIZE):
            for main_col in range(BOARD_SIZE):
                if self.is_playable(main_row, main_col):
                    playable.append((main_row, main_col))
        return playable

    def has_playable_sub_board(self) -> bool:
        return len(self.playable_sub_boards()) > 0

    def empty_cells(self, main_row: int, main_col: int) -> List[Tuple[int, int]]:
        """
        Get all empty cells of a sub-board.

        Returns:
            List of (row, col) tuples.
        """
        rows, cols = np.nonzero(self.cells[main_row, main_col] == Mark.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    # ------------------------------------------------------------------
    # Mutation (engine only)
    # ------------------------------------------------------------------

    def place_mark(self, main_row: int, main_col: int, row: int, col: int,
                   player: Mark):
        """Put a player's mark on an empty cell and record it as the last move."""
        self.cells[main_row, main_col, row, col] = player
        self.move_counts[main_row, main_col] += 1
        self.last_move = LastMove(main_row, main_col, row, col, player)

    def set_outcome(self, main_row: int, main_col: int, outcome: Mark):
        """Resolve a sub-board. The main board follows automatically."""
        self.outcomes[main_row, main_col] = outcome

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            cells=self.cells.copy(),
            outcomes=self.outcomes.copy(),
            move_counts=self.move_counts.copy(),
            current_player=self.current_player,
            target=self.target,
            winner=self.winner,
            last_move=self.last_move,
        )

    # ------------------------------------------------------------------
    # Text output
    # ------------------------------------------------------------------

    def main_to_string(self) -> str:
        """Compact text of the main board, '.' for unresolved sub-boards."""
        return "\n".join(
            " ".join(Mark(int(v)).symbol for v in row)
            for row in self.outcomes
        )

    def render_board(self) -> str:
        """
        Render the full 9x9 board as text.

        Sub-boards are separated by '|' and '-' lines. Headers use
        1-based numbers so they match what a player types.
        """
        lines = ["     1 2 3   4 5 6   7 8 9"]
        separator = "    -------+-------+-------"

        for main_row in range(BOARD_SIZE):
            if main_row > 0:
                lines.append(separator)
            for row in range(BOARD_SIZE):
                blocks = []
                for main_col in range(BOARD_SIZE):
                    blocks.append(" ".join(
                        self.get_cell(main_row, main_col, row, col).symbol
                        for col in range(BOARD_SIZE)
                    ))
                board_row = main_row * BOARD_SIZE + row + 1
                lines.append(f"  {board_row}  " + " | ".join(blocks))

        lines.append("")
        lines.append("Main board:")
        lines.append(self.main_to_string())
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.render_board())

        if self.is_game_over:
            if self.winner == Mark.DRAW:
                print("\nIt's a DRAW!")
            else:
                print(f"\n{self.winner.symbol} WINS!")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")
            if self.target is not None:
                print(f"Forced sub-board: ({self.target[0] + 1}, {self.target[1] + 1})")
