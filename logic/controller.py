"""
Game controller for TicTacToe.

Owns the GameState and is the only thing that changes it. Every public
operation is total: illegal input (occupied cell, bad index, game over)
is ignored rather than raised.
"""

import logging
import numbers
import random
from typing import Callable, List, Optional

from .ai_player import AIPlayer
from .config import GameConfig
from .game_state import GameState, GameResult, Mode, Player, empty_board, BOARD_CELLS
from .scheduler import Scheduler, ManualScheduler
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

Observer = Callable[[GameState], None]


class GameController:
    """
    State machine for one play session.

    Game flow:
    1. The current player places a mark with apply_move()
    2. The board is checked for a win or draw
    3. Otherwise the turn passes to the other mark
    4. In VS_COMPUTER mode the AI answers after a short delay
    5. reset() starts a new game, alternating who opens
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Optional[Scheduler] = None,
        rng: Optional[random.Random] = None,
        computer_player: Optional[Player] = None,
    ):
        """
        Args:
            config: Game settings (defaults to GameConfig()).
            scheduler: Where deferred opponent moves are queued.
            rng: Random source for the opponent's fallback move.
            computer_player: Mark the computer plays (default from config).
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler or ManualScheduler()
        if rng is None:
            rng = random.Random(self.config.RANDOM_SEED)

        self.computer_player = computer_player or self.config.COMPUTER_PLAYER
        self.ai = AIPlayer(self.computer_player, rng)
        self.win_checker = WinChecker()

        self._state = GameState()
        self._observers: List[Observer] = []

        # Pending opponent move, and which game it belongs to
        self._pending = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def get_state(self) -> GameState:
        """A snapshot of the current state; changing it has no effect."""
        return self._state.copy()

    @property
    def opponent_pending(self) -> bool:
        """True while a computer move is scheduled but not yet played."""
        return self._pending is not None

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback run with a state snapshot after every change.

        Returns:
            A function that removes the observer again.
        """
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def apply_move(self, index: int) -> None:
        """
        Place the current player's mark at a board index (0-8).

        Ignored if the index is invalid, the cell is taken, or the
        game is already over.
        """
        state = self._state

        if isinstance(index, bool) or not isinstance(index, numbers.Integral) or not 0 <= index < BOARD_CELLS:
            logger.debug("Ignoring move: invalid index %r", index)
            return
        index = int(index)
        if state.result.is_over:
            logger.debug("Ignoring move at %d: game is already over", index)
            return
        if state.board[index] is not None:
            logger.debug("Ignoring move at %d: cell is occupied", index)
            return

        self._place(index)

        if self._needs_opponent():
            self._schedule_opponent(self.config.OPPONENT_DELAY_MS)

        self._notify()

    def set_mode(self, mode: Mode) -> None:
        """
        Switch between local play and playing the computer.

        Clears the score and starts a new game. Same mode is a no-op.
        """
        if not isinstance(mode, Mode) or mode == self._state.mode:
            return

        logger.info("Mode changed to %s", mode.value)
        self._state.mode = mode
        self._state.score = {Player.X: 0, Player.O: 0}
        self.reset()

    def reset(self) -> None:
        """
        Start a new game. The score is kept.

        The opening player alternates: whoever did not open the last game
        opens this one. If that is the computer, it moves right away.
        """
        self._cancel_pending()
        self._generation += 1

        state = self._state
        state.current_player = state.last_starting_player.opposite()
        state.last_starting_player = state.current_player
        state.board = empty_board()
        state.result = GameResult()

        logger.debug("New game, %s opens", state.current_player.value)

        if self._needs_opponent():
            self._opponent_move()

        self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _place(self, index: int) -> None:
        """Put the current mark down, then settle the result or pass the turn."""
        state = self._state
        state.board[index] = state.current_player

        result = self.win_checker.update_result(state)
        if result.winner is not None:
            logger.info("%s wins on line %s", result.winner.value, result.line)
        elif result.is_over:
            logger.info("Game drawn")
        else:
            state.current_player = state.current_player.opposite()

    def _needs_opponent(self) -> bool:
        state = self._state
        return (
            state.mode == Mode.VS_COMPUTER
            and not state.result.is_over
            and state.current_player == self.computer_player
        )

    def _schedule_opponent(self, delay_ms: int) -> None:
        self._cancel_pending()
        generation = self._generation

        def run():
            if generation != self._generation:
                logger.debug("Dropping opponent move from an old game")
                return
            self._pending = None
            self._opponent_move()
            self._notify()

        self._pending = self.scheduler.call_later(delay_ms, run)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel(self._pending)
            self._pending = None

    def _opponent_move(self) -> None:
        """Let the computer play, if it is really its turn right now."""
        if not self._needs_opponent():
            return

        move = self.ai.get_best_move(self._state)
        if move is None:
            return
        self._place(move)

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(self._state.copy())
            except Exception:
                logger.exception("State observer %r failed", observer)
