"""
Game state for TicTacToe.
Tracks the board, current player, mode, result and score.
"""

from enum import Enum
from typing import Optional, List, Dict, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class Mode(Enum):
    """Who plays the O side."""
    LOCAL = "local"
    VS_COMPUTER = "ai"


class Status(Enum):
    """Phase of the current game."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# A cell is empty (None) or holds a player's mark
Cell = Optional[Player]
Line = Tuple[int, int, int]

BOARD_CELLS = 9

# All possible winning lines as board indices
# Order matters: the first matching line is reported
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> List[Cell]:
    """A fresh board with 9 empty cells."""
    return [None] * BOARD_CELLS


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of the current game.

    winner and line are only set when status is WON.
    """
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @classmethod
    def won(cls, winner: Player, line: Line) -> "GameResult":
        return cls(Status.WON, winner, tuple(line))

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(Status.DRAW)


@dataclass
class GameState:
    """
    The complete state of a TicTacToe session.

    Tracks:
    - The 9-cell board (index = row * 3 + col)
    - Whose turn it is
    - Game mode (local or against the computer)
    - Result of the current game
    - Score per player (kept across resets, cleared on mode change)
    - Who opened the last game (starter alternates on reset)
    """

    board: List[Cell] = field(default_factory=empty_board)

    current_player: Player = Player.X

    mode: Mode = Mode.LOCAL

    result: GameResult = field(default_factory=GameResult)

    score: Dict[Player, int] = field(
        default_factory=lambda: {Player.X: 0, Player.O: 0}
    )

    # O so that the first reset of a session opens with X again
    last_starting_player: Player = Player.O

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of board indices, ascending.
        """
        return [idx for idx, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            mode=self.mode,
            result=self.result,
            score=dict(self.score),
            last_starting_player=self.last_starting_player,
        )

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")

        for row in range(3):
            row_str = "|"
            for col in range(3):
                idx = row * 3 + col
                cell = self.board[idx]
                row_str += f" {cell.value if cell else ' '} |"
            print(f"{row} {row_str}")
            print("  +---+---+---+")

        if self.result.status == Status.WON:
            print(f"\n{self.result.winner.value} WINS! (line {list(self.result.line)})")
        elif self.result.status == Status.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
        print(f"Score - X: {self.score[Player.X]}  O: {self.score[Player.O]}")
