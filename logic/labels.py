"""
Text shown to players: turn line, result message, cell labels.
Shared by the Tk window and the console mode.
"""

from .config import GameConfig
from .game_state import GameState, Mode, Player, Status


def player_label(player: Player) -> str:
    """e.g. 'X (Red)'"""
    return f"{player.value} ({GameConfig.PLAYER_COLORS[player]})"


def turn_text(state: GameState, computer_player: Player = GameConfig.COMPUTER_PLAYER) -> str:
    """
    The 'Current turn' line, empty once the game is over.

    In VS_COMPUTER mode the human side is tagged (You) and the
    computer side (AI).
    """
    if state.result.is_over:
        return ""

    label = player_label(state.current_player)
    if state.mode == Mode.VS_COMPUTER:
        label += " (AI)" if state.current_player == computer_player else " (You)"
    return f"Current turn: {label}"


def result_text(state: GameState) -> str:
    if state.result.status == Status.WON:
        return f"Player {player_label(state.result.winner)} wins!"
    if state.result.status == Status.DRAW:
        return "It's a draw!"
    return ""


def score_text(state: GameState) -> str:
    return "   ".join(
        f"{player_label(player)}: {state.score[player]}" for player in Player
    )


def cell_label(state: GameState, index: int) -> str:
    """Accessible name for a cell, e.g. 'Cell row 1 column 3: X'."""
    size = GameConfig.BOARD_SIZE
    row, col = divmod(index, size)
    label = f"Cell row {row + 1} column {col + 1}"
    cell = state.board[index]
    if cell is not None:
        label += f": {cell.value}"
    return label


def is_cell_enabled(state: GameState, index: int) -> bool:
    """Whether the UI should accept a click on this cell."""
    return state.board[index] is None and not state.result.is_over
