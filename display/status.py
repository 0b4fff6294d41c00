"""
Human-readable status for a game state.
"""

from typing import Optional

from game_engine import GameState, Mark
from .config import DisplayConfig


def get_status_text(state: GameState) -> str:
    """
    One-line status for the status bar.

    Returns:
        "Player X wins!", "Draw!", or "Current turn: Player O".
    """
    if state.winner is not None:
        return f"Player {state.winner.symbol} wins!"
    if state.is_draw:
        return "Draw!"
    return f"Current turn: Player {state.current_turn.symbol}"


def get_status_color(state: GameState, config: Optional[DisplayConfig] = None) -> str:
    """
    Colour for the status text.

    The winner's mark colour once someone has won, otherwise the plain
    status colour (including for a draw).
    """
    config = config or DisplayConfig()
    if state.winner is not None:
        return config.MARK_COLORS[state.winner.symbol]
    return config.STATUS_COLOR


def get_result_message(state: GameState) -> str:
    """Text for the result dialog; empty while the game is running."""
    if state.winner is not None:
        return f"🎉 Player {state.winner.symbol} wins!"
    if state.is_draw:
        return "It's a draw!"
    return ""


def should_show_result(state: GameState) -> bool:
    """True once the game is decided."""
    return state.is_game_over


def get_cell_label(state: GameState, row: int, col: int) -> str:
    """
    Spoken description of a cell, 1-based.

    Returns:
        "Cell 1, 3, filled X" or "Cell 2, 2, empty".
    """
    mark: Optional[Mark] = state.board[row][col]
    if mark is None:
        return f"Cell {row + 1}, {col + 1}, empty"
    return f"Cell {row + 1}, {col + 1}, filled {mark.symbol}"


def is_cell_playable(state: GameState, row: int, col: int) -> bool:
    """A cell can be clicked only while it is empty and the game is running."""
    return not state.is_game_over and state.board[row][col] is None


def get_restart_label(state: GameState, config: Optional[DisplayConfig] = None) -> str:
    """Restart button text: START_LABEL on an untouched board, RESTART_LABEL after."""
    config = config or DisplayConfig()
    if state.move_count > 0 or state.is_game_over:
        return config.RESTART_LABEL
    return config.START_LABEL
