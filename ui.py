"""
TicTacToe UI
A graphical interface for the TicTacToe game using Tkinter.

Shows:
- Score for X and O
- Mode selection (Local 2-Player / Vs Computer) and Reset
- Whose turn it is and the game result
- The 3x3 board, with the winning line highlighted
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.controller import GameController
from logic.game_state import GameState, Mode, Player
from logic.labels import (
    is_cell_enabled, player_label, result_text, turn_text,
)
from logic.scheduler import TkScheduler


BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
WIN_COLOR = '#065f46'
MARK_COLORS = {
    Player.X: '#f87171',  # Red
    Player.O: '#fbbf24',  # Yellow
}
MODE_BUTTONS = [
    ("Local 2-Player", Mode.LOCAL),
    ("Vs Computer", Mode.VS_COMPUTER),
]


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window only reads state snapshots and calls controller
    operations; it never touches the board itself.
    """

    def __init__(self, config: Optional[GameConfig] = None, mode: Mode = Mode.LOCAL):
        """Initialize the UI."""
        self.config = config or GameConfig()

        self._create_ui()

        self.controller = GameController(self.config, scheduler=TkScheduler(self.root))
        self._unsubscribe = self.controller.subscribe(self._render)
        self.controller.set_mode(mode)
        self._render(self.controller.get_state())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 18, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12, 'bold'), foreground='#ffd700')

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Score row
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)
        self.score_labels = {}
        for player in Player:
            label = ttk.Label(score_frame, text="", foreground=MARK_COLORS[player])
            label.pack(side=tk.LEFT, padx=10)
            self.score_labels[player] = label

        # Mode + reset buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=(5, 10))

        self.mode_buttons = {}
        for text, mode in MODE_BUTTONS:
            btn = tk.Button(
                control_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=14,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        tk.Button(
            control_frame,
            text="Reset",
            font=('Segoe UI', 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=8,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        self.turn_label = ttk.Label(main_frame, text="")
        self.turn_label.pack()

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for idx in range(9):
            row, col = divmod(idx, 3)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_COLOR,
                activebackground=CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda i=idx: self._cell_clicked(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _render(self, state: GameState):
        """Redraw everything from a state snapshot."""
        for player, label in self.score_labels.items():
            label.configure(text=f"{player_label(player)}: {state.score[player]}")

        for mode, btn in self.mode_buttons.items():
            if mode == state.mode:
                btn.configure(bg='#10b981', fg='black', relief='sunken')
            else:
                btn.configure(bg='#2d3748', fg='white', relief='raised')

        self.turn_label.configure(
            text=turn_text(state, self.controller.computer_player)
        )
        self.status_label.configure(text=result_text(state))

        winning = state.result.line or ()
        for idx, cell in enumerate(self.board_cells):
            mark = state.board[idx]
            cell.configure(
                text=mark.value if mark else "",
                fg=MARK_COLORS[mark] if mark else 'white',
                disabledforeground=MARK_COLORS[mark] if mark else 'white',
                bg=WIN_COLOR if idx in winning else CELL_COLOR,
                state='normal' if is_cell_enabled(state, idx) else 'disabled',
            )

    def _cell_clicked(self, idx: int):
        self.controller.apply_move(idx)

    def _set_mode(self, mode: Mode):
        print(f"Mode set to: {mode.value}")
        self.controller.set_mode(mode)

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.controller.reset()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._unsubscribe()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   Tic Tac Toe")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
