"""
Undo/redo history for Super Tris.
Keeps independent snapshots of the game state on two stacks.
"""

from collections import deque
from typing import Optional

from .game_state import GameState


class HistoryManager:
    """
    Snapshot based undo/redo.

    ``history`` holds the states before each accepted move (undoable past),
    ``future`` holds the states that were undone (redoable). Every snapshot
    is a deep copy, so no two of them share arrays with each other or with
    the live state.
    """

    def __init__(self, limit: Optional[int] = None):
        """
        Initialize empty stacks.

        Args:
            limit: Max snapshots per stack, None for unbounded.
                The oldest snapshot is dropped when a stack is full.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"History limit must be >= 0, got {limit}")

        self.limit = limit
        self.history = deque(maxlen=limit)
        self.future = deque(maxlen=limit)

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.future) > 0

    def commit(self, game_state: GameState):
        """
        Record the state before a move.
        Anything that was undone can no longer be redone.
        """
        self.history.append(game_state.copy())
        self.future.clear()

    def undo(self, current: GameState) -> Optional[GameState]:
        """
        Step back one move.

        Args:
            current: The live state, saved for redo.

        Returns:
            The state to restore, or None if there is nothing to undo.
        """
        if not self.history:
            return None

        self.future.append(current.copy())
        return self.history.pop()

    def redo(self, current: GameState) -> Optional[GameState]:
        """
        Step forward one undone move.

        Args:
            current: The live state, saved for undo.

        Returns:
            The state to restore, or None if there is nothing to redo.
        """
        if not self.future:
            return None

        self.history.append(current.copy())
        return self.future.pop()

    def clear(self):
        """Forget everything (new game)."""
        self.history.clear()
        self.future.clear()
