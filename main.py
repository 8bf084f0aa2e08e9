"""
Main entry point for TicTacToe.

Launches the Tkinter window by default, or a console game with --no-ui.
"""

import logging
from typing import Optional

from logic.config import GameConfig
from logic.controller import GameController
from logic.game_state import GameState, Mode
from logic.labels import cell_label, result_text, score_text, turn_text
from logic.scheduler import ManualScheduler


MODES = {
    "local": Mode.LOCAL,
    "ai": Mode.VS_COMPUTER,
}

# Accepted cell commands: "0" to "8"
CELL_KEYS = [str(idx) for idx in range(9)]


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Commands:
    - 0-8: place a mark (cells numbered left to right, top to bottom)
    - r: reset the board
    - m: toggle between local and vs-computer mode
    - q: quit
    """

    def __init__(self, config: Optional[GameConfig] = None, mode: Mode = Mode.LOCAL):
        self.config = config or GameConfig()

        # No event loop here: the computer's answer runs right after the human's move
        self.scheduler = ManualScheduler()
        self.controller = GameController(self.config, scheduler=self.scheduler)
        self.controller.set_mode(mode)
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*60)
        print("   Tic Tac Toe - Console")
        print("="*60)
        print("Cells: 0-8 | r = reset | m = toggle mode | q = quit\n")

        self.is_running = True
        self._show(self.controller.get_state())

        while self.is_running:
            command = input("> ").strip().lower()
            self.handle_command(command)

    def handle_command(self, command: str):
        """Apply one line of player input."""
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return
        if command == "r":
            print("\nResetting game...")
            self.controller.reset()
        elif command == "m":
            state = self.controller.get_state()
            new_mode = Mode.LOCAL if state.mode == Mode.VS_COMPUTER else Mode.VS_COMPUTER
            print(f"\nMode set to: {new_mode.value} (score cleared)")
            self.controller.set_mode(new_mode)
        elif command in CELL_KEYS:
            before = self.controller.get_state()
            index = int(command)
            if before.result.is_over:
                print("Game is over! Press 'r' to play again.")
                return
            if before.board[index] is not None:
                print(f"{cell_label(before, index)} is already taken!")
                return
            self.controller.apply_move(index)
            self.scheduler.run_pending()
        else:
            print("Invalid input! Use 0-8, r, m or q.")
            return

        self._show(self.controller.get_state())

    def _show(self, state: GameState):
        state.print_board()
        print(score_text(state))
        message = result_text(state) or turn_text(state, self.controller.computer_player)
        print(message)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="local",
        help="Start in local 2-player mode or against the computer"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.OPPONENT_DELAY_MS,
        help="Milliseconds before the computer answers (UI only)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log game events"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = GameConfig(RANDOM_SEED=args.seed, OPPONENT_DELAY_MS=args.delay)
    mode = MODES[args.mode]

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   Tic Tac Toe")
        print("="*60 + "\n")
        ui = TicTacToeUI(config, mode=mode)
        ui.run()
        return

    game = ConsoleGame(config, mode=mode)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
