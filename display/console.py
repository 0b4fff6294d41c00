"""
Console rendering for Tic Tac Toe.
"""

from typing import Optional, Tuple
from game_engine import GameState, BOARD_SIZE
from .status import get_status_text


def render_board(state: GameState) -> str:
    """
    Draw the board as text.

    Example:
          0   1   2
        +---+---+---+
      0 | X |   | O |
        +---+---+---+
      ...
    """
    separator = "  +" + "---+" * BOARD_SIZE
    lines = ["    " + "   ".join(str(col) for col in range(BOARD_SIZE)), separator]

    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            mark = state.board[row][col]
            cells.append(mark.symbol if mark is not None else " ")
        lines.append(f"{row} | " + " | ".join(cells) + " |")
        lines.append(separator)

    return "\n".join(lines)


def print_board(state: GameState):
    """Print the board and status line to the console."""
    print()
    print(render_board(state))
    print(f"\n{get_status_text(state)}")


def parse_move(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row col" (or "row,col") typed by the user.

    Only checks that two integers were given; range checking is the
    engine's job.

    Returns:
        (row, col), or None if the text isn't two integers.
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None
