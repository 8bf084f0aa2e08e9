"""
Game configuration for TicTacToe.
Timing, opponent and display settings.
"""

from typing import Optional

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.

    Class attributes are the defaults; pass keyword arguments to
    override them for one instance, e.g. GameConfig(OPPONENT_DELAY_MS=0).
    """

    # ==================== OPPONENT SETTINGS ====================
    # The computer always plays this mark in VS_COMPUTER mode
    COMPUTER_PLAYER = Player.O

    # Pause before the computer answers a human move (milliseconds)
    OPPONENT_DELAY_MS = 250

    # Seed for the random fallback move (None = unseeded)
    RANDOM_SEED: Optional[int] = None

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CENTER_INDEX = 4

    # ==================== DISPLAY SETTINGS ====================
    PLAYER_COLORS = {
        Player.X: "Red",
        Player.O: "Yellow",
    }

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name) or not name.isupper():
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    def __repr__(self):
        return (
            f"GameConfig(COMPUTER_PLAYER={self.COMPUTER_PLAYER.value}, "
            f"OPPONENT_DELAY_MS={self.OPPONENT_DELAY_MS}, "
            f"RANDOM_SEED={self.RANDOM_SEED})"
        )
