"""
Display module for Tic Tac Toe.
Reads engine state and turns it into text, colours and dialogs.
"""

from .config import DisplayConfig
from .status import (
    get_status_text,
    get_status_color,
    get_result_message,
    should_show_result,
    get_cell_label,
    is_cell_playable,
    get_restart_label,
)
from .console import render_board, print_board, parse_move
