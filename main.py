"""
Main script for Tic Tac Toe.

Launches the Tkinter UI by default, or a console game with --no-ui.
"""

import argparse
from typing import Callable

from game_engine import GameEngine
from display import print_board, parse_move


HELP_TEXT = "Enter a move as 'row col' (0-2), 'r' to restart, 'q' to quit."


class ConsoleGame:
    """
    Two players sharing one terminal.

    Game flow:
    1. Board and status are printed
    2. The current player types a move
    3. Rejected moves are reported and the same player goes again
    4. Once the game is decided, only restart or quit are accepted
    """

    def __init__(self, input_func: Callable[[str], str] = input):
        self.engine = GameEngine()
        self.input_func = input_func
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting Tic Tac Toe...")
        print(HELP_TEXT)

        self.is_running = True
        print_board(self.engine.state)

        while self.is_running:
            try:
                command = self.input_func("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str):
        """Apply one line of user input."""
        if command in ("q", "quit", "exit"):
            self.is_running = False
            return

        if command in ("r", "restart"):
            print("Resetting game...")
            print_board(self.engine.reset())
            return

        move = parse_move(command)
        if move is None:
            print(HELP_TEXT)
            return

        result = self.engine.make_move(*move)
        if not result.is_valid:
            print(result.error_message)
            return

        state = self.engine.state
        print_board(state)
        if state.is_game_over:
            print("Type 'r' to play again or 'q' to quit.")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import main as ui_main
        ui_main()
        return

    game = ConsoleGame()
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
