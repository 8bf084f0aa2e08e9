"""
AI player for TicTacToe.
A greedy heuristic opponent: win, block, center, then random.
"""

import logging
import random
from typing import Optional, Sequence

import numpy as np

from .config import GameConfig
from .game_state import GameState, Player, Cell, WINNING_LINES
from .win_checker import line_counts

logger = logging.getLogger(__name__)


def find_completing_cell(board: Sequence[Cell], player: Player) -> Optional[int]:
    """
    Find the empty cell that completes a line for player.

    Looks for the first line (in WINNING_LINES order) holding exactly two
    of player's marks and one empty cell.

    Returns:
        Board index of the empty cell, or None.
    """
    counts = line_counts(board, player)
    open_pairs = np.flatnonzero((counts[:, 0] == 2) & (counts[:, 1] == 1))
    if not open_pairs.size:
        return None

    line = WINNING_LINES[int(open_pairs[0])]
    return next(idx for idx in line if board[idx] is None)


def choose_move(
    board: Sequence[Cell],
    player: Player,
    rng: Optional[random.Random] = None,
    center: int = GameConfig.CENTER_INDEX,
) -> Optional[int]:
    """
    Pick a cell for player using the greedy policy.

    Priority:
    1. Win now - complete our own two-in-a-row
    2. Block - complete the opponent's two-in-a-row
    3. Take the center
    4. Uniformly random empty cell

    Args:
        board: Current board snapshot.
        player: The mark to move.
        rng: Randomness source for step 4 (seed it for reproducible play).
        center: Index of the center cell.

    Returns:
        Board index, or None if the board is full.
    """
    move = find_completing_cell(board, player)
    if move is not None:
        return move

    move = find_completing_cell(board, player.opposite())
    if move is not None:
        return move

    if board[center] is None:
        return center

    empty = [idx for idx, cell in enumerate(board) if cell is None]
    if not empty:
        return None
    return (rng or random).choice(empty)


class AIPlayer:
    """
    The computer opponent.

    Not a perfect player: it never looks further than one move ahead,
    so forks beat it.
    """

    def __init__(self, player: Player = GameConfig.COMPUTER_PLAYER, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for the fallback move.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the move for the current position.

        Returns:
            Board index, or None when it's not our turn or nothing is free.
        """
        if game_state.current_player != self.player:
            logger.debug("Not %s's turn, no move", self.player.value)
            return None

        move = choose_move(game_state.board, self.player, self.rng)
        logger.debug("AI (%s) picks cell %s", self.player.value, move)
        return move
