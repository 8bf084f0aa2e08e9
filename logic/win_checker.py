"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, NamedTuple
import numpy as np

from .game_state import (
    GameState, GameResult, Player, Cell, Line, WINNING_LINES, BOARD_CELLS,
)


# Lines as an (8, 3) index array for fancy indexing
LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp)

# Numeric encoding of a cell
MARK_VALUE = {Player.X: 1, Player.O: -1}


class Evaluation(NamedTuple):
    """Terminal-state check of a board snapshot."""
    winner: Optional[Player]
    line: Optional[Line]
    is_draw: bool


def encode_board(board: Sequence[Cell]) -> np.ndarray:
    """
    Encode a board as an int8 vector: X = 1, O = -1, empty = 0.

    Args:
        board: Any 9-cell board snapshot.

    Returns:
        numpy array of shape (9,).
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")
    return np.array(
        [MARK_VALUE[cell] if cell is not None else 0 for cell in board],
        dtype=np.int8,
    )


def line_counts(board: Sequence[Cell], player: Player) -> np.ndarray:
    """
    Count a player's marks and the empty cells on every line.

    Returns:
        (8, 2) array; column 0 = player's marks, column 1 = empty cells.
        Rows follow WINNING_LINES order.
    """
    cells = encode_board(board)[LINE_INDEX]
    mine = np.count_nonzero(cells == MARK_VALUE[player], axis=1)
    empty = np.count_nonzero(cells == 0, axis=1)
    return np.stack([mine, empty], axis=1)


def evaluate(board: Sequence[Cell]) -> Evaluation:
    """
    Check a board for a winner or a draw.

    A line whose three cells sum to +3 or -3 is three equal marks.
    The first such line in WINNING_LINES order is reported.
    With no winner, the board is a draw when no cell is empty.
    """
    encoded = encode_board(board)
    sums = encoded[LINE_INDEX].sum(axis=1)

    hits = np.flatnonzero(np.abs(sums) == 3)
    if hits.size:
        first = int(hits[0])
        winner = Player.X if sums[first] > 0 else Player.O
        return Evaluation(winner, WINNING_LINES[first], False)

    return Evaluation(None, None, bool(np.all(encoded != 0)))


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return evaluate(game_state.board).winner

    def check_draw(self, game_state: GameState) -> bool:
        """True if the board is full and nobody won."""
        return evaluate(game_state.board).is_draw

    def get_winning_line(self, game_state: GameState) -> Optional[Line]:
        """The winning line as board indices, or None."""
        return evaluate(game_state.board).line

    def update_result(self, game_state: GameState) -> GameResult:
        """
        Update the game state with winner/draw information.

        Bumps the winner's score when a win is found.

        Args:
            game_state: The game state to update.

        Returns:
            The new result.
        """
        outcome = evaluate(game_state.board)

        if outcome.winner is not None:
            game_state.result = GameResult.won(outcome.winner, outcome.line)
            game_state.score[outcome.winner] += 1
        elif outcome.is_draw:
            game_state.result = GameResult.draw()

        return game_state.result
