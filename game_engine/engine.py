"""
Game engine for Tic Tac Toe.

Owns one GameState and is the only thing that changes it. Every move is a
synchronous (previous state, move) -> new state step; the outcome is
recomputed from the whole board inside that step, so callers just read the
state back after each call.
"""

from typing import Tuple
from .game_state import GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import compute_outcome


_validator = MoveValidator()


def next_state(state: GameState, row: int, col: int) -> Tuple[GameState, ValidationResult]:
    """
    Apply a move to a state, leaving the given state untouched.

    Args:
        state: The state before the move.
        row: Row index (0-2).
        col: Column index (0-2).

    Returns:
        (new_state, result). On a rejected move new_state is an unchanged
        copy of state and result says why.
    """
    result = _validator.validate_move(state, row, col)
    new_state = state.copy()
    if not result.is_valid:
        return new_state, result

    new_state.board[row][col] = state.current_turn
    new_state.outcome = compute_outcome(new_state.board)

    # Once decided the turn stays with whoever moved last
    if not new_state.is_game_over:
        new_state.current_turn = state.current_turn.opposite()

    new_state.check_invariants()
    return new_state, result


class GameEngine:
    """
    A single Tic Tac Toe game.

    Game flow:
    1. X moves first
    2. Players alternate until someone completes a line or the board fills
    3. The finished board is frozen until reset()

    Bad moves (off the board, occupied cell, game over) are ignored: state
    stays as it was and make_move() reports the reason.
    """

    def __init__(self):
        self._state = GameState()

    def initialize(self) -> GameState:
        """Start a fresh game: empty board, X to move."""
        self._state = GameState()
        return self.state

    def reset(self) -> GameState:
        """Throw away the current game and start over."""
        return self.initialize()

    @property
    def state(self) -> GameState:
        """A copy of the current state, safe for the caller to keep."""
        return self._state.copy()

    def make_move(self, row: int, col: int) -> ValidationResult:
        """
        Place the current player's mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ValidationResult; is_valid is False if the move was ignored.
        """
        self._state, result = next_state(self._state, row, col)
        return result

    def apply_move(self, row: int, col: int) -> GameState:
        """
        Place the current player's mark and return the resulting state.

        The returned state is unchanged if the move was rejected.
        """
        self.make_move(row, col)
        return self.state
