"""
Tic Tac Toe UI
A graphical interface for the game using Tkinter.

Shows:
- The 3x3 board as clickable cells
- Game status (whose turn, who won, draw)
- A Restart control
- A result dialog shortly after the game is decided
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from game_engine import GameEngine, GameState, BOARD_SIZE
from display import (
    DisplayConfig,
    get_status_text,
    get_status_color,
    get_result_message,
    should_show_result,
    get_cell_label,
    is_cell_playable,
    get_restart_label,
)


class TicTacToeUI:
    """
    Main UI class for the game.

    The UI never changes game state itself: clicks and Restart go to the
    GameEngine, then everything on screen is redrawn from engine.state.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """Initialize the UI."""
        self.config = config or DisplayConfig()
        self.engine = GameEngine()

        # Pending root.after() job for the result dialog
        self._result_job: Optional[str] = None
        self.result_dialog: Optional[tk.Toplevel] = None

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.SECONDARY_COLOR)
        self.root.minsize(cfg.WINDOW_MIN_WIDTH, cfg.WINDOW_MIN_HEIGHT)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.SECONDARY_COLOR)
        style.configure('Title.TLabel', background=cfg.SECONDARY_COLOR,
                        foreground=cfg.PRIMARY_COLOR, font=cfg.TITLE_FONT)
        style.configure('Status.TLabel', background=cfg.SECONDARY_COLOR,
                        foreground=cfg.STATUS_COLOR, font=cfg.STATUS_FONT)
        style.configure('Hint.TLabel', background=cfg.SECONDARY_COLOR,
                        foreground=cfg.STATUS_COLOR, font=cfg.HINT_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Board grid
        board_frame = tk.Frame(
            main_frame,
            bg=cfg.PRIMARY_COLOR,
            highlightthickness=0,
            padx=cfg.CELL_PADDING,
            pady=cfg.CELL_PADDING
        )
        board_frame.pack(pady=10)

        self.board_cells = []
        # Tk has no aria-label; the description of each cell is shown under
        # the board when the cell is hovered or focused
        self.cell_descriptions = [["" for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        for row in range(BOARD_SIZE):
            row_cells = []
            for col in range(BOARD_SIZE):
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=cfg.CELL_FONT,
                    width=cfg.CELL_WIDTH,
                    height=cfg.CELL_HEIGHT,
                    bg=cfg.SECONDARY_COLOR,
                    activebackground=cfg.CELL_HOVER_COLOR,
                    relief='flat',
                    highlightbackground=cfg.BORDER_COLOR,
                    takefocus=1,
                    command=lambda r=row, c=col: self._on_cell_click(r, c)
                )
                cell.grid(row=row, column=col, padx=cfg.CELL_PADDING, pady=cfg.CELL_PADDING)
                for event in ("<Enter>", "<FocusIn>"):
                    cell.bind(event, lambda _e, r=row, c=col: self._show_cell_description(r, c))
                for event in ("<Leave>", "<FocusOut>"):
                    cell.bind(event, lambda _e: self.cell_hint_label.configure(text=""))
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        self.cell_hint_label = ttk.Label(main_frame, text="", style="Hint.TLabel")
        self.cell_hint_label.pack()

        self.restart_btn = tk.Button(
            main_frame,
            text=cfg.START_LABEL,
            font=cfg.BUTTON_FONT,
            bg=cfg.PRIMARY_COLOR,
            fg=cfg.SECONDARY_COLOR,
            activebackground=cfg.ACCENT_COLOR,
            width=16,
            command=self._restart
        )
        self.restart_btn.pack(pady=15)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, row: int, col: int):
        """Forward a click to the engine and redraw."""
        result = self.engine.make_move(row, col)
        if not result.is_valid:
            return  # Ignored: occupied cell or game over

        self._refresh()
        self._show_cell_description(row, col)

        if should_show_result(self.engine.state):
            self._result_job = self.root.after(
                self.config.RESULT_DIALOG_DELAY_MS, self._show_result_dialog
            )

    def _refresh(self):
        """Redraw board and status from the engine state."""
        state = self.engine.state
        self._update_board_display(state)
        self._update_status(state)
        self.restart_btn.configure(text=get_restart_label(state, self.config))

    def _update_board_display(self, state: GameState):
        """Update the board grid display."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                mark = state.board[row][col]
                cell = self.board_cells[row][col]
                if mark is None:
                    cell.configure(text="")
                else:
                    color = self.config.MARK_COLORS[mark.symbol]
                    cell.configure(text=mark.symbol, fg=color, disabledforeground=color)

                # Occupied cells and every cell of a finished game are not clickable
                cell.configure(state=tk.NORMAL if is_cell_playable(state, row, col) else tk.DISABLED)
                self.cell_descriptions[row][col] = get_cell_label(state, row, col)

    def _show_cell_description(self, row: int, col: int):
        """Show the hovered or focused cell's description under the board."""
        self.cell_hint_label.configure(text=self.cell_descriptions[row][col])

    def _update_status(self, state: GameState):
        """Update the status label text and colour."""
        self.status_label.configure(
            text=get_status_text(state),
            foreground=get_status_color(state, self.config)
        )

    def _show_result_dialog(self):
        """Pop up the game result. Closing it does not restart the game."""
        self._result_job = None
        state = self.engine.state
        if not should_show_result(state):
            return

        cfg = self.config
        dialog = tk.Toplevel(self.root)
        dialog.title("Game Over")
        dialog.configure(bg=cfg.SECONDARY_COLOR)
        dialog.transient(self.root)
        dialog.resizable(False, False)

        ttk.Label(dialog, text=get_result_message(state), style='Title.TLabel').pack(padx=30, pady=20)

        button_frame = ttk.Frame(dialog)
        button_frame.pack(pady=(0, 20))
        tk.Button(
            button_frame,
            text=get_restart_label(state, cfg),
            font=cfg.BUTTON_FONT,
            bg=cfg.PRIMARY_COLOR,
            fg=cfg.SECONDARY_COLOR,
            width=14,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)
        tk.Button(
            button_frame,
            text=cfg.CLOSE_LABEL,
            font=cfg.BUTTON_FONT,
            width=10,
            command=self._close_result_dialog
        ).pack(side=tk.LEFT, padx=5)

        dialog.protocol("WM_DELETE_WINDOW", self._close_result_dialog)
        self.result_dialog = dialog

    def _close_result_dialog(self):
        """Dismiss the dialog; the finished board stays as it is."""
        if self._result_job is not None:
            self.root.after_cancel(self._result_job)
            self._result_job = None
        if self.result_dialog is not None:
            self.result_dialog.destroy()
            self.result_dialog = None

    def _restart(self):
        """Reset the game."""
        print("Resetting game...")
        self._close_result_dialog()
        self.engine.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._close_result_dialog()
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
