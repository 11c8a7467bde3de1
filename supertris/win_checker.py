"""
Win checker for Super Tris.
Finds three-in-a-row on a sub-board or on the main board and resolves
sub-board and global outcomes after each move.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import GameState, Mark, PLAYERS, CELLS_PER_SUB_BOARD


class WinChecker:
    """
    Checks for win conditions on any 3x3 grid of marks.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally). EMPTY and DRAW
    never count toward a line.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def has_line(self, grid: np.ndarray, player: Mark) -> bool:
        """
        Check if a player has three in a row on a 3x3 grid.

        Args:
            grid: 3x3 array of marks.
            player: X or O.

        Returns:
            True if any row, column or diagonal is all ``player``.
        """
        owned = np.asarray(grid) == player
        return bool(
            owned.all(axis=1).any()
            or owned.all(axis=0).any()
            or np.diagonal(owned).all()
            or np.diagonal(np.fliplr(owned)).all()
        )

    def check_winner(self, grid: np.ndarray) -> Optional[Mark]:
        """
        Check if either player has a line on a grid.

        Returns:
            X or O if that player has a line (X is checked first),
            None otherwise.
        """
        for player in PLAYERS:
            if self.has_line(grid, player):
                return player
        return None

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first completed line on a grid, if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        grid = np.asarray(grid)
        for line in self.WINNING_LINES:
            marks = {int(grid[row, col]) for row, col in line}
            if len(marks) == 1 and marks.pop() in PLAYERS:
                return list(line)
        return None

    def resolve_sub_board(self, game_state: GameState, main_row: int,
                          main_col: int, player: Mark) -> Mark:
        """
        Update a sub-board's outcome after ``player`` marked a cell in it.

        A line by the mover always (re)assigns the sub-board to the mover,
        even if the opponent owned it before. A full sub-board with no
        line for either player becomes a permanent DRAW. A full sub-board
        that already has an owner keeps it.

        Returns:
            The sub-board's outcome after resolution.
        """
        grid = game_state.cells[main_row, main_col]

        if self.has_line(grid, player):
            game_state.set_outcome(main_row, main_col, player)
        elif game_state.get_move_count(main_row, main_col) >= CELLS_PER_SUB_BOARD:
            if self.check_winner(grid) is None:
                game_state.set_outcome(main_row, main_col, Mark.DRAW)

        return game_state.get_outcome(main_row, main_col)

    def check_global_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check the main board for a line of owned sub-boards.

        Returns:
            The winning player, or None.
        """
        return self.check_winner(game_state.outcomes)

    def check_global_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when there is no line on the main board and no
        sub-board is playable anymore. Lines through DRAW sub-boards
        are never considered.
        """
        if self.check_global_winner(game_state) is not None:
            return False
        return not game_state.has_playable_sub_board()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with global winner/draw information.

        Clears the target once the game is over.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        winner = self.check_global_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.target = None
        elif self.check_global_draw(game_state):
            game_state.winner = Mark.DRAW
            game_state.target = None

        return game_state
