"""
Engine configuration for Super Tris.
Defaults for a new game, history size and debug tracing.
"""


class EngineConfig:
    """
    Configuration class for the rule engine.
    Override these values on an instance (or a subclass) before
    handing it to UltimateTicTacToe.
    """

    # ==================== GAME SETTINGS ====================
    # Who moves first in a new game: "X" or "O"
    STARTING_PLAYER = "X"

    # ==================== HISTORY SETTINGS ====================
    # Max snapshots kept on each of the undo/redo stacks.
    # A game never lasts more than 81 moves, so nothing is dropped
    # unless this is lowered. None means unbounded.
    HISTORY_LIMIT = 81

    # ==================== DEBUG SETTINGS ====================
    # Print a trace line for every engine action
    DEBUG_MODE = False
