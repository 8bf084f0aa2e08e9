"""
Tests for the computer opponent's move choice.
"""

import random

import pytest

from logic.ai_player import AIPlayer, choose_move, find_completing_cell
from logic.game_state import GameState, Player
from logic.win_checker import evaluate

X, O = Player.X, Player.O


def board_from(text: str):
    marks = {"X": X, "O": O, ".": None}
    return [marks[ch] for ch in text]


def test_takes_the_win():
    # O can win at 5 (row 1); X also threatens at 2
    board = board_from("XX.OO....")
    assert choose_move(board, O) == 5


def test_win_beats_block_and_center():
    # O wins at 2 (top row); X threatens 4 (middle row); center is free
    board = board_from("OO.X.X...")
    assert choose_move(board, O) == 2


def test_blocks_opponent_pair():
    # X has 0,1; O has nothing open
    board = board_from("XX..O....")
    assert choose_move(board, O) == 2


def test_block_beats_center():
    board = board_from("X.....X..")
    assert choose_move(board, O) == 3


def test_takes_center_when_nothing_urgent():
    board = board_from("X........")
    assert choose_move(board, O) == 4


def test_random_when_center_taken():
    board = board_from("....X....")
    rng = random.Random(7)
    picks = {choose_move(board, O, random.Random(seed)) for seed in range(50)}
    assert picks <= {0, 1, 2, 3, 5, 6, 7, 8}
    assert len(picks) > 1
    # Same seed, same choice
    assert choose_move(board, O, rng) == choose_move(board, O, random.Random(7))


def test_full_board_gives_none():
    assert choose_move(board_from("XOXXOOOXX"), O) is None


def test_first_open_pair_in_line_order():
    # O pairs on row 0 (needs 2) and column 0 (needs 6)
    board = board_from("OO.O.X.XX")
    assert find_completing_cell(board, O) == 2


def test_blocked_pair_is_ignored():
    assert find_completing_cell(board_from("XXO......"), X) is None


@pytest.mark.parametrize("seed", range(20))
def test_never_misses_a_win(seed):
    """Random positions: whenever a win exists, the chosen move wins."""
    rng = random.Random(seed)
    board = [None] * 9
    cells = list(range(9))
    rng.shuffle(cells)
    for i, idx in enumerate(cells[:4]):
        board[idx] = X if i % 2 == 0 else O
    winning = find_completing_cell(board, O)
    if winning is not None:
        move = choose_move(board, O, rng)
        after = list(board)
        after[move] = O
        assert evaluate(after).winner == O


class TestAIPlayer:

    def test_only_moves_on_its_turn(self):
        state = GameState(current_player=X)
        assert AIPlayer(O).get_best_move(state) is None

    def test_picks_center_on_empty_board(self):
        state = GameState(current_player=O)
        assert AIPlayer(O, random.Random(1)).get_best_move(state) == 4

    def test_can_play_x(self):
        state = GameState(board=board_from("OO..X...."), current_player=X)
        assert AIPlayer(X).get_best_move(state) == 2
