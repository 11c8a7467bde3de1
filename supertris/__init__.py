"""
Super Tris
==========
Rule engine for Ultimate Tic-Tac-Toe: nine 3x3 sub-boards inside a 3x3
main board, where the cell you play picks the sub-board your opponent
must play in next.

Handles move validation, sub-board and global outcomes, and undo/redo.
"""

__version__ = "1.0.0"

from .config import EngineConfig
from .game_state import GameState, LastMove, Mark, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .history import HistoryManager
from .public_state import PublicState, SubBoardView
from .game import UltimateTicTacToe, PlayResult
