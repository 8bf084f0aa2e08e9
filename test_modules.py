"""
Smoke tests for the TicTacToe modules.
Run with pytest, or directly to print a quick pass/fail summary.
"""

import sys

import pytest

from logic.config import GameConfig
from logic.controller import GameController
from logic.game_state import GameState, GameResult, Mode, Player
from logic.labels import (
    cell_label, is_cell_enabled, player_label, result_text, score_text, turn_text,
)
from main import ConsoleGame

X, O = Player.X, Player.O


def test_game_config():
    """Test configuration defaults and overrides."""
    config = GameConfig()
    assert config.COMPUTER_PLAYER == O
    assert config.OPPONENT_DELAY_MS == 250
    assert config.CENTER_INDEX == 4

    fast = GameConfig(OPPONENT_DELAY_MS=0, RANDOM_SEED=3)
    assert fast.OPPONENT_DELAY_MS == 0
    assert fast.RANDOM_SEED == 3
    # The class defaults are untouched
    assert GameConfig.OPPONENT_DELAY_MS == 250

    with pytest.raises(AttributeError):
        GameConfig(BOARD_COLOR="blue")


def test_game_state():
    """Test the state dataclass helpers."""
    state = GameState()
    assert len(state.board) == 9
    assert state.get_empty_cells() == list(range(9))

    state.board[4] = X
    clone = state.copy()
    clone.board[0] = O
    clone.score[O] = 2
    assert state.board[0] is None
    assert state.score[O] == 0
    assert 4 not in state.get_empty_cells()

    assert X.opposite() == O
    assert O.opposite() == X


def test_print_board(capsys):
    state = GameState()
    state.board[0] = X
    state.print_board()
    out = capsys.readouterr().out
    assert "| X |" in out
    assert "Current turn: X" in out


def test_labels():
    """Test the text helpers used by the UI and console."""
    state = GameState()
    assert player_label(X) == "X (Red)"
    assert player_label(O) == "O (Yellow)"
    assert turn_text(state) == "Current turn: X (Red)"
    assert result_text(state) == ""

    state.mode = Mode.VS_COMPUTER
    assert turn_text(state) == "Current turn: X (Red) (You)"
    state.current_player = O
    assert turn_text(state) == "Current turn: O (Yellow) (AI)"

    state.result = GameResult.won(O, (0, 1, 2))
    assert turn_text(state) == ""
    assert result_text(state) == "Player O (Yellow) wins!"

    state.result = GameResult.draw()
    assert result_text(state) == "It's a draw!"

    state.score = {X: 2, O: 1}
    assert score_text(state) == "X (Red): 2   O (Yellow): 1"


def test_cell_labels():
    state = GameState()
    assert cell_label(state, 0) == "Cell row 1 column 1"
    state.board[5] = O
    assert cell_label(state, 5) == "Cell row 2 column 3: O"

    assert not is_cell_enabled(state, 5)
    assert is_cell_enabled(state, 0)
    state.result = GameResult.draw()
    assert not is_cell_enabled(state, 0)


def test_game_logic():
    """Play a short game through the controller."""
    game = GameController()
    for idx in (0, 4, 1, 5, 2):
        game.apply_move(idx)
    state = game.get_state()
    assert state.result.winner == X
    assert result_text(state) == "Player X (Red) wins!"


def test_console_game(capsys):
    """Drive the console mode with commands."""
    game = ConsoleGame(GameConfig(RANDOM_SEED=1), mode=Mode.VS_COMPUTER)

    game.handle_command("0")
    state = game.controller.get_state()
    # The computer answered straight away
    assert state.board[0] == X
    assert state.board[4] == O

    game.handle_command("4")
    assert "already taken" in capsys.readouterr().out

    game.handle_command("x")
    assert "Invalid input" in capsys.readouterr().out

    for bad in ("²", "9", "10", "", "-1"):
        game.handle_command(bad)
        assert "Invalid input" in capsys.readouterr().out

    game.handle_command("m")
    assert game.controller.get_state().mode == Mode.LOCAL

    game.handle_command("r")
    assert game.controller.get_state().get_empty_cells() == list(range(9))

    game.is_running = True
    game.handle_command("q")
    assert not game.is_running


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)
    return pytest.main([__file__, "-q"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
