"""
Game engine for Tic Tac Toe.
Handles board state, move validation, turns, and win/draw detection.
"""

from .game_state import GameState, Mark, Outcome, OutcomeStatus, BOARD_SIZE
from .move_validator import MoveValidator, MoveError, ValidationResult
from .win_checker import WinChecker, compute_outcome
from .engine import GameEngine, next_state

__version__ = "1.0.0"
