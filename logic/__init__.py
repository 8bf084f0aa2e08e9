"""
Logic module for TicTacToe.
Handles game state, win detection, the computer opponent and the
controller that ties them together.
"""

__version__ = "1.0.0"

from .game_state import GameState, GameResult, Player, Mode, Status, WINNING_LINES
from .config import GameConfig
from .win_checker import WinChecker, evaluate
from .ai_player import AIPlayer, choose_move
from .scheduler import Scheduler, ManualScheduler, TkScheduler
from .controller import GameController
