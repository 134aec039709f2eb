"""
Game configuration for the TicTacToe engine.
All the settings for the board, the sides and the opponent.
"""

from .board import Cell
from .opponent import Difficulty


class GameConfig:
    """
    Configuration class for game settings.

    Change the class values for new defaults, or override single values
    per instance: GameConfig(BOARD_SIZE=4, DEBUG_MODE=True).
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid; any N >= 1 works
    BOARD_SIZE = 3

    # ==================== SIDE SETTINGS ====================
    # Who moves first when a session starts
    PLAYER_STARTS = True

    # The player's mark; the opponent always gets the other one
    PLAYER_MARK = Cell.CIRCLE

    # ==================== OPPONENT SETTINGS ====================
    DIFFICULTY = Difficulty.MEDIUM

    # MEDIUM only: chance of a random move instead of win/block
    RANDOM_CHANCE = 0.5

    # Seed for the default random source (None = seed from the OS)
    RANDOM_SEED = None

    # If False, the chosen opponent move waits for apply_opponent_move()
    # so the host can pause before showing it
    AUTO_APPLY_OPPONENT = True

    # Pause the console host takes before revealing the opponent's move
    OPPONENT_DELAY_S = 0.5

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not key.isupper() or not hasattr(type(self), key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

    def __repr__(self) -> str:
        settings = ", ".join(
            f"{key}={getattr(self, key)!r}"
            for key in dir(type(self)) if key.isupper()
        )
        return f"GameConfig({settings})"
